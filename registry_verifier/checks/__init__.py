"""Naming and ownership checks applied to data tree entries."""

from .address import AddressChecker
from .ownership import OwnershipResolver, find_codeowners_file

__all__ = ['AddressChecker', 'OwnershipResolver', 'find_codeowners_file']
