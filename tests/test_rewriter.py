import pytest

from nano_jason import tables
from nano_jason.classifier import ClassificationResult
from nano_jason.rewriter import (
    DomainStep, InjectStep, OptimizationLog, RandomPicker, Rewriter, StyleStep,
    SubstitutionStep, TieredStep
)
from nano_jason.tables import PhrasePool


class TestSubstitution:
    def test_picture_of_mapping(self):
        log = OptimizationLog()
        text = SubstitutionStep(tables.PATTERN_MAPPINGS).apply("a picture of a happy dog", log)
        assert text == "high-quality photograph of a happy dog"
        assert log.descriptions() == ['Pattern mapping: "a picture of" → "high-quality photograph of"']
        assert log.categories() == ["pattern"]

    def test_replacement_is_global_and_logged_once(self):
        log = OptimizationLog()
        text = SubstitutionStep(tables.PATTERN_MAPPINGS).apply("cars without wheels, trees without leaves", log)
        assert text == "cars excluding wheels, trees excluding leaves"
        assert len(log) == 1

    def test_mappings_compound_in_order(self):
        step = SubstitutionStep((("nice", "good"), ("good", "great")))
        log = OptimizationLog()
        assert step.apply("a nice day", log) == "a great day"
        assert log.descriptions() == [
            'Pattern mapping: "nice" → "good"',
            'Pattern mapping: "good" → "great"',
        ]

    def test_no_match_leaves_text(self):
        log = OptimizationLog()
        assert SubstitutionStep(tables.PATTERN_MAPPINGS).apply("a cat", log) == "a cat"
        assert len(log) == 0


class TestInjectStep:
    def test_appends_picked_phrase(self, first_picker):
        step = InjectStep("lighting", "Lighting enhancement", tables.LIGHTING_POOL, ("lighting", "light"))
        text, entry = step.apply("a dog", ClassificationResult(), first_picker)
        assert text == "a dog, dramatic lighting"
        assert entry.category == "lighting"
        assert entry.description == 'Lighting enhancement: Added "dramatic lighting"'

    def test_guard_blocks_existing_concept(self, first_picker):
        step = InjectStep("lighting", "Lighting enhancement", tables.LIGHTING_POOL, ("lighting", "light"))
        assert step.apply("a dog in moonlight", ClassificationResult(), first_picker) is None

    def test_existing_phrase_is_not_duplicated_when_flagged(self, first_picker):
        pool = PhrasePool.of("quality", ["sharp focus"])
        step = InjectStep("quality", "Quality enhancement", pool, skip_if_present=True)
        assert step.apply("Sharp Focus portrait", ClassificationResult(), first_picker) is None

    def test_existing_phrase_is_appended_without_flag(self, first_picker):
        pool = PhrasePool.of("composition", ["professional photography"])
        step = InjectStep("composition", "Composition optimization", pool, ("composition", "framing"))
        text, entry = step.apply("professional photography cat", ClassificationResult(), first_picker)
        assert text == "professional photography cat, professional photography"
        assert entry.category == "composition"

    def test_prefix_limits_candidates(self, first_picker):
        step = InjectStep("quality", "Quality enhancement", tables.QUALITY_POOL, ("quality",))
        step.apply("a dog", ClassificationResult(), first_picker)
        assert first_picker.calls[-1] == ["ultra-detailed", "high-resolution", "photorealistic"]


class TestModeSteps:
    def test_style_step_uses_detected_style(self, scripted_picker):
        step = StyleStep(tables.PROMPT_STYLE_POOLS)
        classification = ClassificationResult(facets={"style": "anime"})
        text, entry = step.apply("a girl", classification, scripted_picker("cel shading"))
        assert text == "a girl, cel shading"
        assert entry.description == 'Style enhancement: Added "cel shading" for anime style'

    def test_style_step_without_pool(self, first_picker):
        step = StyleStep(tables.PROMPT_STYLE_POOLS)
        assert step.apply("a girl", ClassificationResult(facets={"style": "pixel"}), first_picker) is None

    def test_domain_step(self, first_picker):
        step = DomainStep(tables.DOMAIN_ENHANCEMENTS)
        text, entry = step.apply("sort function", ClassificationResult(facets={"domain": "programming"}), first_picker)
        assert text == "sort function, well-structured and maintainable"
        assert entry.description == 'Domain enhancement: Added "well-structured and maintainable" for programming'

    def test_domain_step_skips_without_domain(self, first_picker):
        step = DomainStep(tables.DOMAIN_ENHANCEMENTS)
        assert step.apply("bake bread", ClassificationResult(facets={"domain": None}), first_picker) is None

    def test_tiered_step_category_is_pool_name(self, scripted_picker):
        step = TieredStep(tables.TECHNICAL_OPTIMIZATION_POOLS)
        text, entry = step.apply("an api", ClassificationResult(), scripted_picker("security", "zero-trust"))
        assert text == "an api, zero-trust"
        assert entry.category == "security"
        assert entry.description == 'security optimization: Added "zero-trust"'


class TestRewriter:
    def test_guards_see_running_text(self, first_picker):
        steps = (
            InjectStep("lighting", "Lighting enhancement", PhrasePool.of("lighting", ["soft light"]), ("lighting",)),
            InjectStep("glow", "Glow", PhrasePool.of("glow", ["rim glow"]), ("light",)),
        )
        rewriter = Rewriter(steps=steps, picker=first_picker)
        text, log = rewriter.rewrite("a cat", ClassificationResult())
        assert text == "a cat, soft light"
        assert log.categories() == ["lighting"]

    def test_no_duplicate_lighting(self, first_picker):
        steps = (InjectStep("lighting", "Lighting enhancement", tables.LIGHTING_POOL, ("lighting", "light")),)
        rewriter = Rewriter(steps=steps, picker=first_picker)
        text, log = rewriter.rewrite("portrait with dramatic lighting", ClassificationResult())
        assert text == "portrait with dramatic lighting"
        assert not log.has("lighting")

    def test_substitution_runs_before_injection(self, first_picker):
        rewriter = Rewriter(
            SubstitutionStep((("dark", "dramatic low-key lighting"),)),
            (InjectStep("lighting", "Lighting enhancement", tables.LIGHTING_POOL, ("lighting",)),),
            first_picker,
        )
        text, log = rewriter.rewrite("a dark alley", ClassificationResult())
        assert text == "a dramatic low-key lighting alley"
        assert log.categories() == ["pattern"]

    def test_empty_rewriter_is_identity(self):
        text, log = Rewriter().rewrite("anything", ClassificationResult())
        assert text == "anything"
        assert len(log) == 0


class TestRandomPicker:
    def test_seeded_picks_repeat(self):
        options = list(tables.LIGHTING_POOL.phrases)
        a, b = RandomPicker(7), RandomPicker(7)
        picks = [a.pick(options) for _ in range(10)]
        assert picks == [b.pick(options) for _ in range(10)]
        assert set(picks) <= set(options)

    def test_empty_pool_raises(self):
        with pytest.raises(ValueError):
            RandomPicker(1).pick([])
