"""
Real Functionality Tests Package.

These tests run the real Basket behind the managers, with no doubles,
to check the totals and notifications end to end.
"""
