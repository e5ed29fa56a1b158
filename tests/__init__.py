"""
Test Suite for the basket sample.

Structure:
    tests/
    ├── conftest.py          # Shared fixtures and configuration
    ├── unit/                # Mock-based unit tests
    │   ├── test_models.py
    │   ├── test_basket.py
    │   ├── test_basket_manager.py
    │   └── test_settings.py
    └── real/                # Real basket + manager together
        ├── test_basket_manager_real.py
        └── test_demo_real.py

Run tests:
    pytest tests/                    # All tests
    pytest tests/unit/               # Unit tests only
    pytest tests/real/               # Real functionality tests only
    pytest tests/ -m real            # Tests marked @pytest.mark.real
"""
