"""Ordered rewrite rules for handler bodies.

Each rule sees the output of the rule before it, so the order of every
tuple below is part of the converter's behavior. Bump
``RULESET_VERSION`` whenever a rule is added, removed or moved.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Pattern, Tuple, Union

RULESET_VERSION = "1.1.0"


@dataclass(frozen=True)
class RewriteRule:
    """A single literal or regex rewrite applied to the whole text."""

    name: str
    """Rule identifier, e.g. ``"null_equality"``."""

    pattern: str
    """Literal substring, or a regex source when ``is_regex`` is set."""

    replacement: Union[str, Callable[[str], str]]
    """Replacement text; regex rules may use ``\\1``-style group references.

    A callable replacement receives the whole text and returns it rewritten;
    ``pattern`` then names what the callable looks for.
    """

    is_regex: bool = False

    _compiled: Pattern = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self):
        if self.is_regex:
            object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def apply(self, text: str) -> str:
        if callable(self.replacement):
            return self.replacement(text)
        if self.is_regex:
            return self._compiled.sub(self.replacement, text)
        return text.replace(self.pattern, self.replacement)


def literal(name: str, pattern: str, replacement: str) -> RewriteRule:
    return RewriteRule(name, pattern, replacement)


def regex(name: str, pattern: str, replacement: str) -> RewriteRule:
    return RewriteRule(name, pattern, replacement, is_regex=True)


def scanned(name: str, pattern: str, transform: Callable[[str], str]) -> RewriteRule:
    return RewriteRule(name, pattern, transform)


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    """Run ``rules`` over ``text`` as a chain, in order."""
    for rule in rules:
        text = rule.apply(text)
    return text


# ── Special cases ────────────────────────────────────────────────────
# Runs after qualified-name and method-name substitution, so
# `Minecraft.getMinecraft()` has already become `Minecraft.minecraft()`.

SPECIAL_CASE_RULES: Tuple[RewriteRule, ...] = (
    regex(
        "keybinding_factory",
        r'new KeyBinding\(\s*"([^"]+)"\s*,\s*([\w.]+)\s*,\s*"([^"]+)"\s*\)',
        r"ModAPI.KeyBinding.create('\1', \2, '\3')",
    ),
    literal("keybinding_constructor", "new KeyBinding", "ModAPI.KeyBinding.create"),
    literal("minecraft_singleton", "Minecraft.getMinecraft()", "ModAPI.minecraft"),
    literal("minecraft_singleton_mapped", "Minecraft.minecraft()", "ModAPI.minecraft"),
    literal("mc_player", "mc.thePlayer", "ModAPI.player"),
    literal("mc_world", "mc.theWorld", "ModAPI.world"),
    literal("event_cancel", "event.setCanceled(true)", "event.preventDefault = true"),
    literal("event_is_canceled", "event.isCanceled()", "event.preventDefault"),
    literal("nbt_compound", "new NBTTagCompound()", "ModAPI.util.makeArray(ModAPI.nbt.NBTTagCompound)"),
    literal("nbt_list", "new NBTTagList()", "ModAPI.util.makeArray(ModAPI.nbt.NBTTagList)"),
    literal("chat_component", "new ChatComponentText(", "ModAPI.util.str("),
    literal("keyboard_is_down", "Keyboard.isKeyDown", "ModAPI.KeyBinding.isKeyDown"),
    literal("keyboard_key_codes", "Keyboard.KEY_", "ModAPI.KeyBinding.KEY_"),
    literal("keybindings_add", "keyBindings.add", "keyBindings.$add"),
    literal("keybindings_get", "keyBindings.get", "keyBindings.$get"),
    literal("disable_item_lighting", "RenderHelper.disableStandardItemLighting()", "ModAPI.GlStateManager.disableLighting()"),
    literal("enable_item_lighting", "RenderHelper.enableStandardItemLighting()", "ModAPI.GlStateManager.enableLighting()"),
    literal("enable_gui_lighting", "RenderHelper.enableGUIStandardItemLighting()", "ModAPI.GlStateManager.enableGUILighting()"),
)


# ── Framework idioms ─────────────────────────────────────────────────
# Bare class and field references. Word-bounded so `World` does not
# touch `WorldProvider` and `EntityPlayerSP` does not touch `EntityPlayerSPHook`.

FRAMEWORK_RULES: Tuple[RewriteRule, ...] = (
    regex("side_only", r"@SideOnly\(\s*Side\.CLIENT\s*\)", ""),
    literal("fml_common_handler", "FMLCommonHandler.instance()", "ModAPI"),
    literal("mod_loaded", "Loader.isModLoaded", "ModAPI.isModLoaded"),
    literal("gui_modal_rect", "Gui.drawModalRectWithCustomSizedTexture", "ModAPI.minecraft.currentScreen.drawModalRectWithCustomSizedTexture"),
    regex("gui_draw_rect", r"\bGui\.drawRect\b", "ModAPI.minecraft.currentScreen.drawRect"),
    literal("mc_font_renderer", "mc.fontRenderer", "ModAPI.minecraft.fontRenderer"),
    literal("mc_sound_handler", "mc.getSoundHandler()", "ModAPI.minecraft.soundHandler"),
    literal("mouse_button", "Mouse.isButtonDown", "ModAPI.mouse.isButtonDown"),
    literal("resource_location", "new ResourceLocation", "ModAPI.util.resourceLocation"),
    literal("positioned_sound", "new PositionedSoundRecord", "ModAPI.util.sound"),
    regex("vec3", r"\bnew Vec3\b", "ModAPI.util.vec3"),
    literal("player_world", "player.worldObj", "ModAPI.world"),
    literal("the_player", ".thePlayer", ".player"),
    literal("the_world", ".theWorld", ".world"),
    literal("font_renderer_field", ".fontRendererObj", ".$fontRendererObj"),
    regex("math_helper", r"\bMathHelper\.", "ModAPI.util.math."),
    regex("block_pos", r"\bnew BlockPos\b", "new ModAPI.util.BlockPos"),
    regex("enum_facing", r"\bEnumFacing\.", "ModAPI.util.EnumFacing."),
    regex("entity_player_sp", r"\bEntityPlayerSP\b", "ModAPI.player"),
    regex("entity_player_mp", r"\bEntityPlayerMP\b", "ModAPI.server.player"),
    regex("gl_state_manager", r"(?<![\w.])GlStateManager\.", "ModAPI.GlStateManager."),
    *(
        regex(f"static_{prefix.lower()}", rf"(?<![\w.$]){prefix}\.", f"{target}.")
        for prefix, target in (
            ("Items", "ModAPI.items"),
            ("Blocks", "ModAPI.blocks"),
            ("Item", "ModAPI.items"),
            ("Block", "ModAPI.blocks"),
            ("Material", "ModAPI.materials"),
        )
    ),
    literal("get_block", ".getBlock()", ".block"),
    literal("get_meta", ".getMeta()", ".meta"),
    literal("get_stack", ".getStack()", ".stack"),
    literal("get_unlocalized_name", ".getUnlocalizedName()", ".unlocalizedName"),
    literal("mark_dirty", ".markDirty()", ".markBlockForUpdate()"),
    *(
        regex(f"type_{name.lower()}", rf"(?<![\w.$]){name}\b", target)
        for name, target in (
            # GUI and rendering
            ("GuiScreen", "ModAPI.minecraft.currentScreen"),
            ("GuiMainMenu", "ModAPI.minecraft.GuiMainMenu"),
            ("GuiChat", "ModAPI.minecraft.GuiChat"),
            ("GuiContainer", "ModAPI.minecraft.GuiContainer"),
            ("GuiNewChat", "ModAPI.minecraft.ingameGUI.persistantChatGUI"),
            ("EntityRenderer", "ModAPI.minecraft.entityRenderer"),
            ("RenderGlobal", "ModAPI.minecraft.renderGlobal"),
            ("RenderManager", "ModAPI.minecraft.renderManager"),
            ("EffectRenderer", "ModAPI.minecraft.effectRenderer"),
            # Server and network
            ("MinecraftServer", "ModAPI.server"),
            ("CommandHandler", "ModAPI.server.commandManager"),
            ("NetworkManager", "ModAPI.network"),
            ("C01PacketChatMessage", "ModAPI.network.packets.C01PacketChatMessage"),
            ("SimpleNetworkWrapper", "ModAPI.network"),
            ("PacketBuffer", "ModAPI.network.PacketBuffer"),
            # Gameplay
            ("MovingObjectPosition", "ModAPI.util.MovingObjectPosition"),
            ("InventoryPlayer", "ModAPI.player.inventory"),
            ("CreativeTabs", "ModAPI.creativeTabs"),
            ("EntityAIBase", "ModAPI.entity.ai.base"),
            ("PathNavigate", "ModAPI.entity.navigator"),
        )
    ),
)


# ── Generic Java → JavaScript syntax ─────────────────────────────────

_INTEGER_CAST_RE = re.compile(r"\((?:int|long|short|byte)\)\s*")
_MEMBER_RE = re.compile(r"[\w$]+")


def _group_end(text: str, start: int) -> int:
    """Index just past the bracket group opening at ``start``.

    Brackets inside string and char literals are ignored. An unclosed
    group runs to the end of the text.
    """
    depth = 0
    quote = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return len(text)


def _operand_end(text: str, start: int) -> int:
    """End of the cast operand: a primary plus its ``.member(...)`` chain."""
    i = start
    if i < len(text) and text[i] == "-":
        i += 1
    if i < len(text) and text[i] == "(":
        i = _group_end(text, i)
    else:
        match = _MEMBER_RE.match(text, i)
        if match is None:
            return start
        i = match.end()

    while i < len(text):
        if text[i] in "([":
            i = _group_end(text, i)
        elif text[i] == ".":
            match = _MEMBER_RE.match(text, i + 1)
            if match is None:
                break
            i = match.end()
        else:
            break
    return i


def wrap_integer_casts(text: str) -> str:
    """Rewrite ``(int) expr`` as ``Math.floor(expr)``.

    The operand is the whole call chain after the cast, so
    ``(int) a.b().c()`` floors the result of ``c()``. Casts nested in
    the operand are rewritten too.
    """
    out = []
    pos = 0
    while True:
        match = _INTEGER_CAST_RE.search(text, pos)
        if match is None:
            out.append(text[pos:])
            return "".join(out)

        out.append(text[pos:match.start()])
        end = _operand_end(text, match.end())
        operand = wrap_integer_casts(text[match.end():end])
        if operand.startswith("(") and _group_end(operand, 0) == len(operand):
            out.append(f"Math.floor{operand}")
        elif operand:
            out.append(f"Math.floor({operand})")
        pos = end


SYNTAX_RULES: Tuple[RewriteRule, ...] = (
    # (a) declarations
    regex("line_comments", r"(?m)(^|\s)//[^\n]*", r"\1"),
    regex("final_modifier", r"\bfinal\s+", ""),
    regex(
        "enhanced_for",
        r"\bfor\s*\(\s*[\w$.]+(?:<[^<>;]*>)?(?:\[\])*\s+(\w+)\s*:\s*",
        r"for (let \1 of ",
    ),
    regex(
        "typed_declaration",
        r"\b(?!(?:return|else|new|throw|case)\b)[A-Za-z_$][\w$.]*(?:<[^<>=;]*>)?(?:\[\])*\s+([A-Za-z_$][\w$]*)\s*=(?!=)",
        r"let \1 =",
    ),

    # (b) null checks
    literal("equals_null", ".equals(null)", " === null"),
    regex("null_equality", r"(?<![=!<>])==\s*null\b", "=== null"),
    regex("null_inequality", r"!=(?!=)\s*null\b", "!== null"),

    # (c) numeric casts
    scanned("integer_cast", _INTEGER_CAST_RE.pattern, wrap_integer_casts),
    regex("float_cast", r"\((?:float|double)\)\s*", ""),

    # (d) wrapped Java collections
    literal("collection_size", ".size()", ".$size()"),
    literal("collection_get", ".get(", ".$get("),
    literal("collection_add", ".add(", ".$add("),

    # (e) strings
    literal("single_quotes", '"', "'"),
    literal("to_string", ".toString()", ""),

    # (f) type checks
    regex(
        "instanceof",
        r"([\w$.]+(?:\([^()]*\))?)\s+instanceof\s+([\w$.]+)",
        r"\1.getRef() instanceof ModAPI.reflect.getClassById('\2').class",
    ),

    # (g) whitespace
    regex("brace_spacing", r"\{\s*([^}]+?)\s*\}", r"{ \1 }"),
    regex("collapse_whitespace", r"\s+", " "),
)

# Strips the braces that delimit the method body itself
OUTER_BRACES = regex("outer_braces", r"^\s*\{|\}\s*$", "")
