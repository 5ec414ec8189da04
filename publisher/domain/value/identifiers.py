"""Strongly typed resource names.

Halo identifies every resource by its ``metadata.name``; NewType keeps tag,
category, post and snapshot names from being mixed up.
"""

from typing import NewType

TagName = NewType("TagName", str)
CategoryName = NewType("CategoryName", str)
PostName = NewType("PostName", str)
SnapshotName = NewType("SnapshotName", str)
