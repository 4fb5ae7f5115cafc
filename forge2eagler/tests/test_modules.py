"""Tests for required-module detection."""

from forge2eagler.core.conversion.modules import RequiredModuleDetector
from forge2eagler.tests.fixtures import COMBAT_HELPER, NETWORK_ONLY, RESOLUTION_ONLY


class TestRequiredModuleDetector:
    def test_combat_helper(self):
        detector = RequiredModuleDetector()
        assert detector.detect(COMBAT_HELPER) == frozenset({"player", "resolution"})

    def test_single_module_sources(self):
        detector = RequiredModuleDetector()
        assert detector.detect(RESOLUTION_ONLY) == frozenset({"resolution"})
        assert detector.detect(NETWORK_ONLY) == frozenset({"network"})

    def test_substring_match_in_comment(self):
        detector = RequiredModuleDetector()
        assert detector.detect("// uses the WorldProvider\nclass A {}") == frozenset({"world"})

    def test_case_sensitive(self):
        detector = RequiredModuleDetector()
        assert detector.detect("class A { int packet; }") == frozenset()

    def test_ordered_follows_table(self):
        detector = RequiredModuleDetector()
        assert detector.ordered({"resolution", "network", "player"}) == ["player", "network", "resolution"]

    def test_ordered_ignores_unknown_modules(self):
        detector = RequiredModuleDetector()
        assert detector.ordered({"world", "sound"}) == ["world"]

    def test_custom_triggers(self):
        detector = RequiredModuleDetector({"sound": ("SoundHandler",)})
        assert detector.detect("SoundHandler h;") == frozenset({"sound"})
        assert detector.detect("EntityPlayerSP p;") == frozenset()
