"""End-to-end tests for the Forge → ModAPI converter."""

import re

import pytest

from forge2eagler.core import ConversionError, ConverterSettings, ForgeToEaglerConverter, convert, format_script
from forge2eagler.tests.fixtures import (
    BROKEN,
    COMBAT_HELPER,
    NETWORK_ONLY,
    NO_ANNOTATION,
    RESOLUTION_ONLY,
)

_LISTENER_RE = re.compile(r"addEventListener\('([\w:<>.]+)'")


def _requires(script):
    return re.findall(r"ModAPI\.require\('(\w+)'\);", script)


@pytest.fixture
def converter():
    return ForgeToEaglerConverter()


# =========================================================================
# Tests: Full conversion
# =========================================================================

class TestCombatHelper:
    def test_metadata_lines(self, converter):
        lines = convert(COMBAT_HELPER).split("\n")
        assert lines[:3] == [
            'ModAPI.meta.title("combathelper");',
            'ModAPI.meta.version("2.1");',
            'ModAPI.meta.description("Combat Helper");',
        ]
        assert lines[3] == ""

    def test_required_modules(self):
        assert _requires(convert(COMBAT_HELPER)) == ["player", "resolution"]

    def test_listener_categories_in_order(self):
        assert _LISTENER_RE.findall(convert(COMBAT_HELPER)) == ["render", "tick", "frame"]

    def test_listener_contents(self):
        script = convert(COMBAT_HELPER)
        assert script.count("if (!ModAPI.minecraft || !ModAPI.player) return;") == 3
        assert "console.error('[onRender] Error:', error);" in script
        assert "console.error('[onKey] Error:', error);" in script
        assert "let player = ModAPI.minecraft.player;" in script
        assert "Math.floor(player.$getHealth())" in script
        assert "ModAPI.reflect.getClassById('ItemSword').class" in script
        assert "for (let entity of entities)" in script
        assert "ModAPI.util.str(message)" in script

    def test_helper_methods_not_emitted(self):
        script = convert(COMBAT_HELPER)
        assert "getDamageVsEntity" not in script
        assert "[getItemDamage]" not in script

    def test_every_listener_closed(self):
        script = convert(COMBAT_HELPER)
        assert script.count("});") == 3
        assert script.endswith("});")

    def test_deterministic(self):
        assert convert(COMBAT_HELPER) == convert(COMBAT_HELPER)


class TestOtherSources:
    def test_no_mod_annotation(self):
        script = convert(NO_ANNOTATION)
        assert "ModAPI.meta" not in script
        assert "ModAPI.require" not in script
        assert script.startswith("ModAPI.addEventListener('render', (event) => {")
        assert "event.preventDefault = true;" in script

    def test_empty_source(self):
        assert convert("") == ""

    def test_custom_category(self):
        source = "class A { @SubscribeEvent public void hurt(LivingHurtEvent event) { x(); } }"
        assert _LISTENER_RE.findall(convert(source)) == ["custom:livinghurtevent"]

    def test_guard_objects_setting(self):
        settings = ConverterSettings(guard_objects=["ModAPI.world"])
        script = convert(NO_ANNOTATION, settings)
        assert "if (!ModAPI.world) return;" in script
        assert "!ModAPI.player" not in script


# =========================================================================
# Tests: Failure
# =========================================================================

class TestParseFailure:
    def test_broken_source_raises(self, converter):
        with pytest.raises(ConversionError) as excinfo:
            converter.convert(BROKEN)
        assert str(excinfo.value).startswith("Failed to parse Java source code")
        assert excinfo.value.line >= 1

    def test_failure_leaves_no_modules(self, converter):
        with pytest.raises(ConversionError):
            converter.convert("public class Broken { EntityPlayerSP p = ; ")
        assert converter.required_modules == frozenset()

    def test_is_value_error(self):
        assert issubclass(ConversionError, ValueError)


# =========================================================================
# Tests: Required-module accumulation
# =========================================================================

class TestModuleAccumulation:
    def test_modules_carry_over_between_calls(self, converter):
        assert _requires(converter.convert(RESOLUTION_ONLY)) == ["resolution"]
        assert _requires(converter.convert(NETWORK_ONLY)) == ["network", "resolution"]
        assert converter.required_modules == frozenset({"network", "resolution"})

    def test_reset(self, converter):
        converter.convert(RESOLUTION_ONLY)
        converter.reset()
        assert _requires(converter.convert(NETWORK_ONLY)) == ["network"]

    def test_accumulation_disabled(self):
        converter = ForgeToEaglerConverter(ConverterSettings(accumulate_required_modules=False))
        converter.convert(RESOLUTION_ONLY)
        assert _requires(converter.convert(NETWORK_ONLY)) == ["network"]
        assert converter.required_modules == frozenset()

    def test_module_level_convert_is_fresh(self):
        convert(RESOLUTION_ONLY)
        assert _requires(convert(NETWORK_ONLY)) == ["network"]


# =========================================================================
# Tests: Files
# =========================================================================

class TestConvertFile:
    def test_convert_file(self, converter, tmp_path):
        path = tmp_path / "CombatHelperMod.java"
        path.write_text(COMBAT_HELPER, encoding="utf-8")
        assert converter.convert_file(path) == convert(COMBAT_HELPER)

    def test_missing_file(self, converter, tmp_path):
        with pytest.raises(OSError):
            converter.convert_file(tmp_path / "Missing.java")


# =========================================================================
# Tests: Rewritten idioms end to end
# =========================================================================

CHAT_AND_ITEMS = '''
public class Readout {
    @SubscribeEvent
    public void onTick(TickEvent.ClientTickEvent event) {
        ItemStack stack = mc.thePlayer.getHeldItem();
        if (stack != null && stack.getItem() == Items.potionitem) {
            mc.thePlayer.addChatMessage(new ChatComponentText("Pos: " + mc.thePlayer.posX + " blocks"));
        }
    }
}
'''

SCHEDULED_TASK = '''
public class Scheduler {
    @SubscribeEvent
    public void onTick(TickEvent.ClientTickEvent event) {
        Minecraft.getMinecraft().addScheduledTask(() -> { doWork(); });
    }
}
'''


class TestRewrittenIdioms:
    def test_concatenated_chat_message_keeps_code(self):
        script = convert(CHAT_AND_ITEMS)
        assert (
            "ModAPI.player.$addChatComponentMessage("
            "ModAPI.util.str('Pos: ' + ModAPI.player.posX + ' blocks'));"
        ) in script

    def test_static_item_reference(self):
        script = convert(CHAT_AND_ITEMS)
        assert "stack.$getItem() == ModAPI.items.potionitem" in script
        assert " Items." not in script

    def test_inline_listener_terminator_loses_body(self):
        # Known limitation: a body line containing `});` is taken as the
        # end of the listener block and replaced by it.
        script = convert(SCHEDULED_TASK)
        assert "doWork" not in script
        assert script.count("});") == 2


# =========================================================================
# Tests: Formatter stability
# =========================================================================

class TestFormattedOutput:
    @pytest.mark.parametrize("source", [COMBAT_HELPER, NO_ANNOTATION])
    def test_reformatting_is_stable(self, source):
        script = convert(source)
        assert format_script(script) == script
