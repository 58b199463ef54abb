import itertools
from enum import Enum

_event_ids = itertools.count()


class EventType(Enum):
    ARRIVAL = "ARRIVAL"
    DEPARTURE = "DEPARTURE"
    TIMEOUT = "TIMEOUT"
    CUSTOM = "CUSTOM"


class Event:
    def __init__(self, id_, time, type_, node_id, payload=None):
        self.id = id_
        self.time = time
        self.type = type_
        self.node_id = node_id
        self.payload = payload

    def __repr__(self):
        return f"Event(id={self.id}, time={self.time}, type={self.type.name}, node_id={self.node_id})"


def new_event(time, type_: EventType, node_id: int, payload=None) -> Event:
    return Event(next(_event_ids), time, type_, node_id, payload)


def compare_event(a: Event, b: Event) -> bool:
    # same-time events run in creation order
    if a.time == b.time:
        return a.id < b.id
    return a.time < b.time


def with_time(event: Event, time) -> Event:
    """Copy of ``event`` at another time, keeping its id."""
    return Event(event.id, time, event.type, event.node_id, event.payload)
