import logging
import time
from typing import Callable, Dict, Optional

import numpy as np

from event import Event, EventType, compare_event, new_event, with_time
from heap_ import Heap
from params import HeapParams, SimulationParams

logger = logging.getLogger(__name__)

Handler = Callable[[Event, "Simulation"], None]


class Simulation:
    """Discrete-event loop over a heap of pending events."""

    def __init__(self, params: Optional[HeapParams] = None, random_generator: Optional[np.random.Generator] = None):
        params = (params or HeapParams()).validate()
        self.events = Heap(compare_event, params.initial_capacity, params.growth_factor)
        self.current_time = 0.0
        self.random_generator = random_generator if random_generator is not None else np.random.default_rng()

    @classmethod
    def from_params(cls, sim_params: SimulationParams, heap_params: Optional[HeapParams] = None) -> "Simulation":
        """Seeded simulation with ``sim_params.n_events`` arrivals already scheduled."""
        sim_params.validate()
        simulation = cls(heap_params, np.random.default_rng(sim_params.seed))
        if sim_params.n_events:
            simulation.generate_arrivals(sim_params.n_events, sim_params.arrival_rate, sim_params.n_nodes)
        return simulation

    def schedule(self, time_, type_: EventType, node_id: int, payload=None) -> Event:
        if time_ < self.current_time:
            raise ValueError(f"Cannot schedule event at {time_}, current time is {self.current_time}")
        return self.events.push(new_event(time_, type_, node_id, payload))

    def reschedule(self, event_id: int, new_time) -> bool:
        if new_time < self.current_time:
            raise ValueError(f"Cannot reschedule event at {new_time}, current time is {self.current_time}")
        return self.events.update(lambda event: event.id == event_id, lambda event: with_time(event, new_time))

    def cancel(self, event_id: int) -> bool:
        return self.events.remove(lambda event: event.id == event_id) is not None

    def generate_arrivals(self, n: int, rate: float, n_nodes: int):
        """Schedule ``n`` arrivals with exponential inter-arrival times."""
        if rate <= 0:
            raise ValueError(f"Arrival rate must be positive, got {rate}")
        gaps = self.random_generator.exponential(scale=1.0 / rate, size=n)
        nodes = self.random_generator.integers(0, n_nodes, size=n)
        arrival_times = self.current_time + np.cumsum(gaps)
        for arrival_time, node_id in zip(arrival_times, nodes):
            self.schedule(float(arrival_time), EventType.ARRIVAL, int(node_id))

    def run(self, handlers: Dict[EventType, Handler], until=None) -> int:
        """Process events in time order, returning how many were handled.

        With ``until`` set, events later than it are left queued.
        """
        logger.info("Starting simulation with %d pending events", len(self.events))
        begin = time.time()
        processed = 0
        while not self.events.is_empty():
            if until is not None and self.events.peek().time > until:
                break
            event = self.events.pop()
            self.current_time = event.time
            handler = handlers.get(event.type)
            if handler is None:
                raise ValueError(f"No handler for event type {event.type.name}")
            handler(event, self)
            processed += 1

        logger.info(
            "Processed %d events in %.2f s, %d still pending", processed, time.time() - begin, len(self.events)
        )
        return processed
