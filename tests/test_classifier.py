import pytest

from nano_jason import tables
from nano_jason.classifier import Classifier, ClassificationResult, detect_all, detect_first
from nano_jason.modes import GENERAL, PROMPT, TECHNICAL
from nano_jason.tables import KeywordTable


@pytest.fixture
def general_classifier():
    return Classifier(GENERAL.single_tables, GENERAL.multi_tables)


class TestDetectFirst:
    def test_returns_default_without_match(self):
        assert detect_first("a quiet afternoon", tables.STYLE_TABLE) == "realistic"
        assert detect_first("a quiet afternoon", tables.MOOD_TABLE) == "neutral"

    def test_no_default_gives_none(self):
        assert detect_first("a quiet afternoon", tables.SETTING_TABLE) is None

    def test_earlier_label_wins_tie(self):
        # "dark" triggers both mysterious and scary; mysterious is declared first
        assert detect_first("a dark night", tables.MOOD_TABLE) == "mysterious"

    def test_small_table_substitution(self):
        table = KeywordTable.build("tone", {"warm": ["sun"], "cold": ["ice"]}, default="flat")
        assert detect_first("ice and sun", table) == "warm"
        assert detect_first("ice only", table) == "cold"

    def test_substring_over_match_is_kept(self):
        # "cool" is not a trigger here, but "cat" inside "catch" is
        assert detect_all("a catch of the day", tables.CHARACTER_TABLE) == ["cat"]


class TestDetectAll:
    def test_declaration_order(self):
        assert detect_all("a dog chasing a cat", tables.CHARACTER_TABLE) == ["cat", "dog"]

    def test_limit_truncates(self):
        text = "person man woman child boy girl baby"
        found = detect_all(text, tables.CHARACTER_TABLE)
        assert len(found) == 5
        assert found == ["person", "man", "woman", "child", "boy"]

    def test_item_limit(self):
        text = "sword shield armor crown wand staff book car airplane boat"
        assert len(detect_all(text, tables.ITEM_TABLE)) == 8

    def test_color_limit(self):
        text = "red blue green yellow orange purple pink"
        assert detect_all(text, tables.COLOR_TABLE) == ["red", "blue", "green", "yellow", "orange", "purple"]


class TestClassifier:
    def test_quiet_afternoon_defaults(self, general_classifier):
        result = general_classifier.classify("a quiet afternoon")
        assert result.facet("style") == "realistic"
        assert result.facet("mood") == "neutral"
        assert result.facet("setting") is None
        assert result.collection("characters") == []
        assert result.collection("items") == []

    def test_case_insensitive(self, general_classifier):
        result = general_classifier.classify("A Happy DOG in the Forest")
        assert result.facet("mood") == "happy"
        assert result.facet("setting") == "forest"
        assert result.collection("characters") == ["dog"]

    def test_idempotent(self, general_classifier):
        text = "An epic wizard with a sword in a castle at sunset"
        assert general_classifier.classify(text) == general_classifier.classify(text)

    def test_full_scene(self, general_classifier):
        result = general_classifier.classify("a magical dragon flying over a red castle at sunset, aerial view")
        assert result.facet("style") == "fantasy"
        assert result.facet("action") == "flying"
        assert result.facet("lighting") == "sunset"
        assert result.facet("composition") == "aerial view"
        assert result.facet("setting") == "castle"
        assert "dragon" in result.collection("characters")
        assert result.collection("items") == ["castle"]
        assert result.collection("color_palette") == ["red"]

    def test_prompt_styles(self):
        classifier = Classifier(PROMPT.single_tables)
        assert classifier.classify("anime style girl").facet("style") == "anime"
        assert classifier.classify("a bowl of soup").facet("style") == "realistic"

    def test_technical_domain_has_no_default(self):
        classifier = Classifier(TECHNICAL.single_tables)
        assert classifier.classify("write a function").facet("domain") == "programming"
        assert classifier.classify("bake bread").facet("domain") is None

    def test_lowercase_triggers_match_any_case_input(self):
        classifier = Classifier(TECHNICAL.single_tables)
        assert classifier.classify("Ship it on Kubernetes").facet("domain") == "architecture"

    def test_triggers_with_capitals_never_match(self):
        classifier = Classifier(TECHNICAL.single_tables)
        assert classifier.classify("an iOS app").facet("domain") is None
        assert classifier.classify("a REST API").facet("domain") is None
        assert classifier.classify("Build a REST API with authentication").facet("domain") == "security"
        assert classifier.classify("encryption at rest").facet("domain") == "security"

    def test_triggers_kept_as_declared(self):
        assert "API" in tables.DOMAIN_TABLE.triggers("programming")
        assert "React" in tables.DOMAIN_TABLE.triggers("webdev")


class TestCodeContext:
    def test_languages_and_frameworks_rendered(self):
        classifier = Classifier(context_tables=TECHNICAL.context_tables)
        context = classifier.extract_context("a react app in typescript")
        assert context == ["Programming Language: TYPESCRIPT", "Framework: React"]

    def test_pattern_triggers_label(self):
        classifier = Classifier(context_tables=TECHNICAL.context_tables)
        assert "Programming Language: RUST" in classifier.extract_context("uses the borrow checker")

    def test_capitalized_patterns_never_match(self):
        classifier = Classifier(context_tables=TECHNICAL.context_tables)
        assert classifier.extract_context("Uses OOP, NPM and ES6+") == []

    def test_context_capped(self):
        classifier = Classifier(context_tables=TECHNICAL.context_tables)
        text = "javascript typescript python java rust go react vue"
        assert len(classifier.extract_context(text)) == 5


class TestClassificationResult:
    def test_with_collection_does_not_mutate(self):
        result = ClassificationResult(facets={"style": "anime"})
        updated = result.with_collection("code_context", ["Framework: Vue"])
        assert result.collection("code_context") == []
        assert updated.collection("code_context") == ["Framework: Vue"]
        assert updated.facet("style") == "anime"

    def test_facet_default(self):
        assert ClassificationResult().facet("domain", "general") == "general"
