"""
Markup Restoration Tests - Unit Tests for Entity-to-Marker Conversion

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- waformat.adapters.telegram.markup (restore_markup)
- telegram (MessageEntity)
"""
from telegram import MessageEntity

from waformat.adapters.telegram.markup import restore_markup


def _entity(kind, offset, length):
    return MessageEntity(kind, offset, length)


class TestRestoreMarkup:
    def test_plain_text_unchanged(self):
        assert restore_markup("hello *there*") == "hello *there*"

    def test_empty_text(self):
        assert restore_markup(None) == ""
        assert restore_markup("") == ""

    def test_each_style(self):
        entities = [
            _entity(MessageEntity.BOLD, 0, 1),
            _entity(MessageEntity.ITALIC, 2, 1),
            _entity(MessageEntity.STRIKETHROUGH, 4, 1),
            _entity(MessageEntity.CODE, 6, 1),
            _entity(MessageEntity.SPOILER, 8, 1),
        ]
        assert restore_markup("a b c d e", entities) == "*a* _b_ ~c~ `d` ||e||"

    def test_unsupported_entities_ignored(self):
        entities = [
            _entity(MessageEntity.URL, 4, 11),
            _entity(MessageEntity.UNDERLINE, 0, 3),
        ]
        assert restore_markup("see example.com", entities) == "see example.com"

    def test_nested_spans(self):
        entities = [
            _entity(MessageEntity.BOLD, 0, 5),
            _entity(MessageEntity.ITALIC, 1, 3),
        ]
        assert restore_markup("hello", entities) == "*h_ell_o*"

    def test_same_span_closes_in_reverse_order(self):
        entities = [
            _entity(MessageEntity.BOLD, 0, 5),
            _entity(MessageEntity.ITALIC, 0, 5),
        ]
        assert restore_markup("hello", entities) == "*_hello_*"

    def test_adjacent_spans(self):
        entities = [
            _entity(MessageEntity.BOLD, 0, 2),
            _entity(MessageEntity.ITALIC, 2, 2),
        ]
        assert restore_markup("abcd", entities) == "*ab*_cd_"

    def test_offsets_in_utf16_units(self):
        # The emoji takes two UTF-16 code units
        entities = [_entity(MessageEntity.BOLD, 3, 2)]
        assert restore_markup("😀 hi", entities) == "😀 *hi*"

    def test_persian_text(self):
        entities = [_entity(MessageEntity.SPOILER, 0, 4)]
        assert restore_markup("سلام دنیا", entities) == "||سلام|| دنیا"
