from __future__ import annotations

from supercast.operations import CreatableResource, DeletableResource, ListableResource
from supercast.registry import register
from supercast.resource import Resource, custom_method


@register
@custom_method("resend", http_verb="post")
@custom_method("revoke", http_verb="post")
class Invite(ListableResource, CreatableResource, DeletableResource, Resource):
    OBJECT_NAME = "invite"
