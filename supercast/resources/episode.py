from __future__ import annotations

from supercast.operations import (
    CreatableResource,
    DeletableResource,
    ListableResource,
    UpdatableResource,
)
from supercast.registry import register
from supercast.resource import Resource


@register
class Episode(
    ListableResource, CreatableResource, UpdatableResource, DeletableResource, Resource
):
    """A published or draft episode of a channel."""

    OBJECT_NAME = "episode"
