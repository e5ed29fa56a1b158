"""
Basket Sample - Mock-friendly basket and basket managers.

A small domain used to show how to stub a capability interface, verify
calls, set up return values and raise events in unit tests.

Modules:
    models: Product and ProductAddedEvent data holders
    basket: BasketLike capability and the list-backed Basket
    basket_manager: BasketManager and BasketManagerWithInterface
    demo: Wires a real basket and manager and logs the total

Entry Point:
    python -m src.demo
"""

__version__ = "0.1.0"
