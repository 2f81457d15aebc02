from clipboard import Clipboard, ClipboardEntry, PixelEntry
from selection import RectSelection


def test_single_slot_operations():
    board = Clipboard()
    assert board.peek() is None and board.copy is None
    entry = ClipboardEntry([PixelEntry(0, 0, None)], RectSelection(0, 0, 1, 1))
    board.set(entry)
    assert board.peek() is entry and board.copy is entry
    assert board.has_content()
    assert board.take() is entry
    assert board.peek() is None


def test_empty_entry_is_still_stored():
    board = Clipboard()
    board.set(ClipboardEntry([], RectSelection(0, 0, 2, 2)))
    assert board.peek() is not None
    assert board.peek().is_empty()
    assert not board.has_content()
    board.clear()
    assert board.copy is None
