from __future__ import annotations

from supercast.operations import ListableResource, UpdatableResource
from supercast.registry import register
from supercast.resource import Resource


@register
class Creator(ListableResource, UpdatableResource, Resource):
    OBJECT_NAME = "creator"
