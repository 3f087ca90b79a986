"""
Pattern catalog.

Importing this package declares every example. Modules are imported in a
fixed order (behavioral, creational, structural) and that order is the
registration order of the catalog.
"""

# pylint: disable=unused-import
from catalog.patterns import (  # noqa: F401
    chain_of_responsibility,
    iterator,
    mediator,
    memento,
    observer,
    strategy,
)
from catalog.patterns import (  # noqa: F401
    abstract_factory,
    builder,
    factory,
    object_pool,
    prototype,
    singleton,
)
from catalog.patterns import (  # noqa: F401
    adapter,
    bridge,
    composite,
    flyweight,
)
