"""Tests for i18nkit.i18n.translator module."""

import pytest

from i18nkit.i18n import Language, Plurality, Translator, Value
from tests.factories.i18n import RecordingLog, make_language, make_translator


@pytest.mark.unit
class TestTranslator:
    """Tests for Translator construction and helpers."""

    def test_translator_indexes_languages(self, en_language, da_language):
        """Languages are indexed by identifier."""
        translator = Translator(en_language, da_language)
        assert sorted(translator.get_available_languages()) == ["da-dk", "en-us"]
        assert translator.get_language("en-us") is en_language

    def test_translator_without_languages(self):
        """A translator can be built with no languages."""
        translator = Translator()
        assert translator.get_available_languages() == []
        assert translator.log is None

    def test_duplicate_identifier_last_wins(self):
        """A later language replaces an earlier one with the same id."""
        first = Language(id="en-us", keys={"k": Value(one="first")})
        second = Language(id="en-us", keys={"k": Value(one="second")})
        translator = Translator(first, second)
        assert translator.tfunc("en-us")("k").render() == "second"

    def test_has_key(self, translator):
        """has_key() checks a single language."""
        assert translator.has_key("apple.count", "en-us")
        assert not translator.has_key("apple.count", "da-dk")
        assert not translator.has_key("title", "xx-xx")

    def test_get_language_unknown(self, translator):
        """get_language() returns None for unknown ids."""
        assert translator.get_language("xx-xx") is None


@pytest.mark.unit
class TestTfunc:
    """Tests for fallback-chain resolution."""

    def test_hit_in_first_language(self, translator, recording_log):
        """A hit returns the one bucket without diagnostics."""
        tr = translator.tfunc("en-us")
        t = tr("title")
        assert t.plurality is Plurality.ONE
        assert t.render() == "One world"
        assert len(recording_log) == 0

    def test_second_language(self, translator):
        """Each resolver uses its own language order."""
        assert translator.tfunc("da-dk")("title").render() == "En verden"

    def test_fallback_to_next_language(self, translator, recording_log):
        """A miss moves on to the next language."""
        tr = translator.tfunc("da-dk", "en-us")
        assert tr("apple.count").plural(3, 10).render() == "3 apples"
        assert recording_log.messages == [
            "No translation match for key: apple.count in language da-dk, trying next language"
        ]

    def test_unknown_language_skipped(self, translator, recording_log):
        """An unknown language id does not stop resolution."""
        tr = translator.tfunc("xx-xx", "en-us")
        assert tr("title").render() == "One world"
        assert recording_log.messages == ["Language xx-xx does not exist"]

    @pytest.mark.parametrize(
        "languages",
        [("en-us",), ("da-dk", "en-us"), ("xx-xx",), ("en-us", "da-dk", "xx-xx")],
    )
    def test_unknown_key_renders_key(self, translator, languages):
        """An unresolved key renders itself in every bucket."""
        t = translator.tfunc(*languages)("no.such.key")
        assert t.render() == "no.such.key"
        assert t.zero().render() == "no.such.key"
        assert t.plural(3, 10).render() == "no.such.key"
        assert t.plural(30, 10).render() == "no.such.key"
        assert t.other().render() == "no.such.key"

    def test_unknown_key_logs_final_diagnostic(self, translator, recording_log):
        """The last diagnostic reports the key missing everywhere."""
        translator.tfunc("en-us", "da-dk")("nope")
        assert len(recording_log) == 3
        assert recording_log.messages[-1] == (
            "No translation match for key: nope in any of the languages given"
        )

    def test_empty_fallback_list(self, translator, recording_log):
        """With no languages the key itself is returned."""
        assert translator.tfunc()("title").render() == "title"
        assert len(recording_log) == 1

    def test_no_log_is_silent(self):
        """Without a sink, misses are dropped and nothing raises."""
        translator = make_translator(make_language())
        assert translator.tfunc("xx", "en-us")("missing").render() == "missing"

    def test_set_log_after_tfunc(self):
        """A sink installed later is used by existing resolvers."""
        translator = make_translator()
        tr = translator.tfunc("en-us")
        log = RecordingLog()
        translator.set_log(log)
        tr("missing")
        assert len(log) == 2

    def test_handle_inherits_log(self, translator, recording_log):
        """Handles report template errors to the translator's sink."""
        t = translator.tfunc("en-us")("apple.count").with_data({}).other()
        assert t.render() == " other apples"
        assert len(recording_log) == 1

    def test_lookup_does_not_mutate_translator(self, translator):
        """Resolving keys leaves the language index untouched."""
        before = dict(translator.languages)
        translator.tfunc("xx", "en-us", "da-dk")("missing")
        assert translator.languages == before
