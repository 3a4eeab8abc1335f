import asyncio
from pathlib import Path
import pytest
from src.lib.navigator import ViewMode
from src.lib.resolver import ResolveError
from src.ui.app import PickerApp, visible_window


class FakeStore:
    root = Path('/nonexistent')

    def __init__(self, entries):
        self.entries = entries
        self.calls = 0

    def list_secrets(self):
        self.calls += 1
        return {k: k for k in self.entries}

class FakeResolver:
    def __init__(self, plaintext=None, error=None):
        self.plaintext = plaintext
        self.error = error
        self.calls = []

    def resolve(self, identifier):
        self.calls.append(identifier)
        if self.error:
            raise ResolveError(self.error)
        return self.plaintext

class FakeSink:
    def __init__(self):
        self.delivered = []

    def deliver(self, value):
        self.delivered.append(value)


async def settle(app, pilot, rounds=2):
    for _ in range(rounds):
        await app.workers.wait_for_complete()
        await pilot.pause()

def run(coro):
    return asyncio.run(coro)


def test_pick_field_from_record():
    store = FakeStore(['bank', 'email/work', 'email/home'])
    resolver = FakeResolver('login: a@b.com\npw: x\n')
    sink = FakeSink()
    app = PickerApp(store, resolver, sink)

    async def scenario():
        async with app.run_test() as pilot:
            await settle(app, pilot)
            nav = app.navigator
            assert nav.filtered_keys() == ['bank', 'email/home', 'email/work']
            await pilot.press('w', 'o', 'r')
            await pilot.pause()
            assert nav.filter_text == 'wor'
            assert nav.filtered_keys() == ['email/work']
            await pilot.press('enter')
            await settle(app, pilot)
            assert resolver.calls == ['email/work']
            assert nav.mode is ViewMode.DETAIL
            assert nav.filter_text == ''
            await pilot.press('ctrl+j')
            await pilot.pause()
            assert nav.selected_key() == 'pw'
            await pilot.press('ctrl+l')
            await settle(app, pilot, rounds=1)

    run(scenario())
    assert sink.delivered == ['x']
    assert app.return_value is None

def test_back_from_detail_reloads_then_escape_exits():
    store = FakeStore(['bank'])
    sink = FakeSink()
    app = PickerApp(store, FakeResolver('user: bob'), sink)

    async def scenario():
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press('ctrl+l')
            await settle(app, pilot)
            assert app.navigator.mode is ViewMode.DETAIL
            await pilot.press('ctrl+h')
            await settle(app, pilot)
            assert app.navigator.mode is ViewMode.LIST
            assert store.calls == 2
            await pilot.press('escape')

    run(scenario())
    assert sink.delivered == []
    assert app.return_value is None

def test_resolve_failure_becomes_result():
    app = PickerApp(FakeStore(['bank']), FakeResolver(error='pass failed'), FakeSink())

    async def scenario():
        async with app.run_test() as pilot:
            await settle(app, pilot)
            await pilot.press('enter')
            await settle(app, pilot, rounds=1)

    run(scenario())
    assert app.return_value == 'pass failed'

@pytest.mark.parametrize('total,index,height,expected', [
    (3, 0, 5, (0, 3)),
    (20, 0, 5, (0, 5)),
    (20, 10, 5, (8, 13)),
    (20, 19, 5, (15, 20)),
])
def test_visible_window(total, index, height, expected):
    assert visible_window(total, index, height) == expected
