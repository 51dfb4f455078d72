import pytest

from parsers.qt_context import ROOT_TAG, ContextStack
from parsers.qt_registry import AtomRegistry, DispatchEntry


@pytest.fixture
def stack():
    context = ContextStack()
    context.push(ROOT_TAG)
    context.push('moov')
    context.frames[-1].attributes['timescale'] = 600
    context.push('trak')
    context.push('mdia')
    context.frames[-1].attributes['timescale'] = 30
    context.push('elst')
    return context


def test_find_returns_innermost_match(stack):
    frame = stack.find('timescale')
    assert frame.tag == 'mdia'
    assert stack.find_value('timescale') == 30


def test_find_with_pattern(stack):
    stack.frames[2].attributes['HdlrSubCmpt'] = 'sprt'
    stack.frames[3].attributes['HdlrSubCmpt'] = 'alis'
    assert stack.find_value('HdlrSubCmpt', '^(?!alis)') == 'sprt'
    assert stack.find('HdlrSubCmpt', 'vide') is None


def test_find_value_default(stack):
    assert stack.find_value('tracks') is None
    assert stack.find_value('tracks', default=0) == 0


def test_set_on_parent(stack):
    stack.set_on_parent('ActionType', 'mcActionPlay')
    assert stack.frames[-2].attributes['ActionType'] == 'mcActionPlay'
    assert stack.parent_attributes()['ActionType'] == 'mcActionPlay'
    assert stack.top_tag() == 'elst'
    assert stack.parent_tag() == 'mdia'


def test_parent_attributes_are_read_only(stack):
    with pytest.raises(TypeError):
        stack.parent_attributes()['timescale'] = 1


def test_no_parent_frame():
    context = ContextStack()
    context.push(ROOT_TAG)
    with pytest.raises(IndexError):
        context.set_on_parent('x', 1)
    context.pop()
    with pytest.raises(IndexError):
        context.pop()
    assert context.top_tag() is None


def test_registry_wraps_string_names():
    registry = AtomRegistry()
    entry = registry.register('zzzz', name='Test atom')
    assert entry.decode is None
    assert entry.name(None) == 'Test atom'
    assert 'zzzz' in registry


def test_registry_rejects_empty_tag():
    with pytest.raises(ValueError):
        AtomRegistry().register('')


def test_registry_copy_is_independent():
    registry = AtomRegistry([('abcd', None, 'One')])
    clone = registry.copy()
    clone.register('efgh', name='Two')
    clone.unregister('abcd')
    assert registry.tags() == ['abcd']
    assert clone.tags() == ['efgh']


def test_registry_update_accepts_entries_and_tuples():
    registry = AtomRegistry()
    registry.update([DispatchEntry('aaaa'), ('bbbb', None, 'B')])
    assert len(registry) == 2
    assert registry.lookup('bbbb').name(None) == 'B'
    assert registry.lookup('cccc') is None
