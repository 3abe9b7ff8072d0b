"""Test suite for flexerr.

- unit/: Unit tests, one module per <layer>_<module>, marked with @pytest.mark.unit
"""
