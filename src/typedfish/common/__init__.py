# -*- coding: utf-8 -*-
"""
Resource model and read-modify-write update implementation
"""

from .sharedtypes import (
    JSONEncoder,
    Dictable
)

from .collection import (
    CollectionError,
    check_response,
    fetch,
    get_collection,
    get_members,
    list_referenced
)

from .entity import (
    InternalUpdateError,
    SnapshotMissingError,
    SnapshotDecodeError,
    Property,
    Link,
    Record,
    Entity
)

from .types import (
    State,
    Health,
    IndicatorLED,
    DurableNameFormat,
    Protocol,
    Status,
    Identifier
)
