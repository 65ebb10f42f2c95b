"""
Pet Registry - one pet record per owner identity.

Owners register, read and update their pet; a fixed administrator
identity may delete any record.
"""

__version__ = "0.1.0"

# API module is available but not exported by default
# Import explicitly: from pet_registry.api import create_app

__all__ = []
