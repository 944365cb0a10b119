# tests/unit/test_executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest

from declstate.builder import MachineBuilder
from declstate.errors import NoMatchingTransition, UndefinedEvent
from declstate.executor import EventExecutor


@pytest.fixture
def executor(movement_builder):
    return EventExecutor(movement_builder.build())


def test_fire(executor, move, movement, host_factory):
    host = host_factory(movement.STANDING)

    change = executor.fire(host, move.RUN)

    assert change == (movement.STANDING, movement.RUNNING)
    assert host.changes == [(move.RUN, movement.STANDING, movement.RUNNING)]


def test_fire_undefined_event(movement, host_factory):
    executor = EventExecutor(MachineBuilder().state(movement.STANDING).build())
    with pytest.raises(UndefinedEvent):
        executor.fire(host_factory(movement.STANDING), "walk")


def test_rejection_is_logged(executor, move, movement, host_factory, caplog):
    host = host_factory(movement.RUNNING)

    with caplog.at_level(logging.INFO, logger="declstate.executor"):
        with pytest.raises(NoMatchingTransition):
            executor.fire(host, move.RUN)

    assert "RUN rejected by Host" in caplog.text
    assert "no transition from state RUNNING" in caplog.text


def test_can_fire(executor, move, movement, host_factory):
    host = host_factory(movement.STANDING)
    assert executor.can_fire(host, move.WALK) is True
    assert executor.can_fire(host, move.HOLD) is False


def test_available_events(executor, move, movement, host_factory):
    assert executor.available_events(host_factory(movement.STANDING)) == [move.WALK, move.RUN]
    assert executor.available_events(host_factory(movement.WALKING)) == [move.RUN, move.HOLD]
    assert executor.available_events(host_factory(movement.RUNNING)) == [move.HOLD]


def test_definition_property(movement_builder):
    definition = movement_builder.build()
    assert EventExecutor(definition).definition is definition
