"""Tests for the deterministic template generator."""

import pytest

from app.services.errors import DurationOutOfRange
from app.services.script import (
    THEME_CATALOG,
    THEME_OPTIONS,
    CustomTopic,
    KnownTheme,
    TemplateScriptGenerator,
    partition_duration,
    resolve_topic,
)
from app.services.script.templates import custom_topic_template


@pytest.fixture
def generator() -> TemplateScriptGenerator:
    return TemplateScriptGenerator()


class TestPartitionDuration:
    """Tests for splitting a duration across three scenes."""

    def test_even_split(self):
        assert partition_duration(30) == (10, 10, 10)

    def test_remainder_goes_to_last_scene(self):
        assert partition_duration(20) == (6, 6, 8)
        assert partition_duration(31) == (10, 10, 11)

    @pytest.mark.parametrize("duration", [1, 2])
    def test_tiny_durations_collapse_into_last_scene(self, duration):
        assert partition_duration(duration) == (0, 0, duration)

    @pytest.mark.parametrize("duration", range(1, 121))
    def test_parts_always_sum_to_duration(self, duration):
        first, second, third = partition_duration(duration)
        assert first + second + third == duration
        assert first == second == duration // 3
        assert third - first == duration % 3
        assert min(first, second, third) >= 0

    @pytest.mark.parametrize("duration", [0, -1, -30])
    def test_rejects_non_positive(self, duration):
        with pytest.raises(DurationOutOfRange):
            partition_duration(duration)


class TestResolveTopic:
    """Tests for catalog lookup."""

    def test_known_themes(self):
        assert resolve_topic("animals") == KnownTheme("animals")
        assert resolve_topic("space") == KnownTheme("space")

    @pytest.mark.parametrize("topic", ["Animals", "SPACE", " animals", "space ", "butterflies"])
    def test_lookup_is_exact(self, topic):
        assert resolve_topic(topic) == CustomTopic(topic)

    def test_picker_themes_without_template_are_custom(self):
        assert resolve_topic("dinosaurs") == CustomTopic("dinosaurs")


class TestTemplateScriptGenerator:
    """Tests for full script generation from templates."""

    def test_animals_30(self, generator):
        content = generator.generate("animals", 30)

        assert [scene.duration for scene in content.scenes] == [10, 10, 10]
        assert content.total_duration == 30
        assert content.title == THEME_CATALOG["animals"].title
        assert content.title == "🐘 Amazing Animal Facts!"
        assert content.scenes[0].text_overlay == "🐘 ELEPHANTS!"

    def test_butterflies_20(self, generator):
        content = generator.generate("butterflies", 20)

        assert [scene.duration for scene in content.scenes] == [6, 6, 8]
        assert content.total_duration == 20
        assert "BUTTERFLIES!" in content.scenes[0].text_overlay
        assert content.title == "🎉 Fun Facts About butterflies!"

    def test_space_1(self, generator):
        content = generator.generate("space", 1)

        assert [scene.duration for scene in content.scenes] == [0, 0, 1]
        assert content.total_duration == 1
        assert content.title == "🚀 Journey to Space!"

    def test_scene_numbers_are_contiguous(self, generator):
        content = generator.generate("ocean", 45)
        assert [scene.scene_number for scene in content.scenes] == [1, 2, 3]

    @pytest.mark.parametrize("topic", ["animals", "space"])
    @pytest.mark.parametrize("duration", [3, 15, 29, 45, 60, 61])
    def test_catalog_durations_sum_exactly(self, generator, topic, duration):
        content = generator.generate(topic, duration)

        assert len(content.scenes) == 3
        assert content.scene_duration_sum == duration
        assert content.total_duration == duration

    def test_catalog_text_is_fixed(self, generator):
        short = generator.generate("space", 15)
        long = generator.generate("space", 60)

        for a, b in zip(short.scenes, long.scenes):
            assert a.narration == b.narration
            assert a.visual_description == b.visual_description
            assert a.text_overlay == b.text_overlay

    def test_custom_topic_is_embedded_verbatim(self, generator):
        content = generator.generate("Fun facts about Bees", 30)

        assert "Fun facts about Bees" in content.title
        assert "Fun facts about Bees" in content.description
        assert content.scenes[0].text_overlay == "FUN FACTS ABOUT BEES!"
        assert content.scenes[0].narration == "Let's learn something amazing about Fun facts about Bees!"

    def test_mismatched_case_uses_generic_template(self, generator):
        content = generator.generate("Animals", 30)

        assert content.title == "🎉 Fun Facts About Animals!"
        assert content.scenes[0].text_overlay == "ANIMALS!"

    def test_output_is_deterministic(self, generator):
        first = generator.generate("volcanoes", 47)
        second = generator.generate("volcanoes", 47)

        assert first == second
        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)

    def test_negative_duration_is_rejected(self, generator):
        with pytest.raises(DurationOutOfRange):
            generator.generate("animals", -3)

    def test_scenes_cannot_be_mutated(self, generator):
        content = generator.generate("animals", 30)

        assert isinstance(content.scenes, tuple)
        with pytest.raises(AttributeError):
            content.scenes.append(content.scenes[0])
        with pytest.raises(TypeError):
            content.scenes[0] = content.scenes[1]
        assert [scene.scene_number for scene in content.scenes] == [1, 2, 3]

    def test_generic_template_follows_intro_fact_conclusion(self):
        template = custom_topic_template("rainbows")

        assert "introduction" in template.scenes[0].visual_description
        assert "fun fact" in template.scenes[1].narration
        assert "conclusion" in template.scenes[2].visual_description


class TestThemeOptions:
    def test_only_catalog_themes_have_templates(self):
        with_template = {option.id for option in THEME_OPTIONS if option.has_template}
        assert with_template == set(THEME_CATALOG)

    def test_picker_lists_eight_themes(self):
        assert [option.id for option in THEME_OPTIONS] == [
            "animals", "space", "dinosaurs", "ocean",
            "alphabet", "numbers", "colors", "shapes",
        ]
