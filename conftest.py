"""
pytest fixtures shared by the fieldscan tests
"""

import pytest

from fieldscan.log import LOG_DISPATCHER, config_logger


class EventRecorder:
    def __init__(self):
        self.events = []

    def __call__(self, logger, name, event_dict):
        self.events.append(event_dict)

    def names(self):
        return [event['event'] for event in self.events]

    def find(self, event_name):
        return [event for event in self.events if event['event'] == event_name]


@pytest.fixture
def log_events():
    config_logger(verbose=0)
    recorder = EventRecorder()
    LOG_DISPATCHER.add_handler(recorder)
    try:
        yield recorder
    finally:
        LOG_DISPATCHER.remove_handler(recorder)
