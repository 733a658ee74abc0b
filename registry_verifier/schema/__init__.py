"""Schema loading and document validation.

This package only depends on the address checker so that schema handling
stays independent of how the data tree is walked.
"""

from .registry import (
    SchemaDocument,
    SchemaRegistry,
    SchemaViolation,
    load_registry,
)
