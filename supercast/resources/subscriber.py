from __future__ import annotations

from supercast.operations import (
    CreatableResource,
    DeletableResource,
    ListableResource,
    UpdatableResource,
)
from supercast.registry import register
from supercast.resource import Resource, custom_method


@register
@custom_method("suspend", http_verb="post")
@custom_method("unsuspend", http_verb="post")
class Subscriber(
    ListableResource, CreatableResource, UpdatableResource, DeletableResource, Resource
):
    """A listener with access to one or more private feeds.

    ``Subscriber.suspend(id)`` and ``Subscriber.unsuspend(id)`` toggle feed access.
    """

    OBJECT_NAME = "subscriber"
