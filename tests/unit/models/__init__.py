"""
Unit tests for VDA5050 Pydantic models.

This package contains unit tests for all VDA5050 message models, covering
decoding, encoding, range checks and the DecodeError/ValidationError split.

Test modules:
- test_base_models.py: Tests for shared base models, enums and error taxonomy
- test_connection.py: Tests for Connection message model
- test_state.py: Tests for State message model
- test_order.py: Tests for Order message model
- test_instant_actions.py: Tests for InstantActions message model
- test_visualization.py: Tests for Visualization message model
- fixtures.py: Shared test fixtures and helper functions
"""
