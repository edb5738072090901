"""Concrete API resources; importing this package registers their type tags."""

from supercast.resources.channel import Channel
from supercast.resources.creator import Creator
from supercast.resources.episode import Episode
from supercast.resources.invite import Invite
from supercast.resources.subscriber import Subscriber

__all__ = ["Channel", "Creator", "Episode", "Invite", "Subscriber"]
