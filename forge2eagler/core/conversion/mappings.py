"""Forge → EaglerForge lookup tables.

Process-wide, read-only configuration. Every table is wrapped in a
``MappingProxyType`` and iterates in declaration order; the rewriter and
the module detector depend on that order.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


# =============================================================================
# Fully-qualified class names → ModAPI expressions
# =============================================================================

QUALIFIED_NAMES: Mapping[str, str] = MappingProxyType({
    # Client
    "net.minecraft.client.Minecraft": "ModAPI.minecraft",
    "net.minecraft.client.entity.EntityPlayerSP": "ModAPI.player",
    "net.minecraft.client.multiplayer.WorldClient": "ModAPI.world",
    "net.minecraft.client.settings.GameSettings": "ModAPI.minecraft.gameSettings",
    "net.minecraft.client.network.NetHandlerPlayClient": "ModAPI.network",
    "net.minecraft.client.gui.ScaledResolution": "ModAPI.resolution",

    # GUI
    "net.minecraft.client.gui.GuiScreen": "ModAPI.minecraft.currentScreen",
    "net.minecraft.client.gui.GuiMainMenu": "nmcg_GuiMainMenu",
    "net.minecraft.client.gui.GuiChat": "nmcg_GuiChat",
    "net.minecraft.client.gui.inventory.GuiContainer": "nmcg_GuiContainer",
    "net.minecraft.client.gui.GuiNewChat": "ModAPI.minecraft.ingameGUI.persistantChatGUI",

    # Renderer
    "net.minecraft.client.renderer.EntityRenderer": "nmcr_EntityRenderer",
    "net.minecraft.client.renderer.RenderGlobal": "nmcr_RenderGlobal",
    "net.minecraft.client.renderer.entity.RenderManager": "ModAPI.minecraft.renderManager",
    "net.minecraft.client.renderer.GlStateManager": "nlevo_GlStateManager",

    # Entity
    "net.minecraft.entity.Entity": "ModAPI.entity",
    "net.minecraft.entity.player.EntityPlayer": "ModAPI.player",
    "net.minecraft.entity.player.EntityPlayerMP": "ModAPI.server.player",

    # World
    "net.minecraft.world.World": "ModAPI.world",
    "net.minecraft.world.chunk.Chunk": "ModAPI.world.getChunkFromBlockCoords",
    "net.minecraft.world.WorldProvider": "ModAPI.world.provider",

    # Items/Blocks
    "net.minecraft.init.Items": "ModAPI.items",
    "net.minecraft.init.Blocks": "ModAPI.blocks",
    "net.minecraft.item.Item": "ModAPI.items",
    "net.minecraft.block.Block": "ModAPI.blocks",
    "net.minecraft.block.material.Material": "ModAPI.materials",

    # NBT
    "net.minecraft.nbt.NBTTagCompound": "ModAPI.util.makeArray(ModAPI.nbt.NBTTagCompound)",
    "net.minecraft.nbt.NBTTagList": "ModAPI.util.makeArray(ModAPI.nbt.NBTTagList)",

    # Network
    "net.minecraft.network.NetworkManager": "ModAPI.network",
    "net.minecraft.network.play.client.C01PacketChatMessage": "ModAPI.network.packets.C01PacketChatMessage",

    # Server
    "net.minecraft.server.MinecraftServer": "ModAPI.server",
    "net.minecraft.command.CommandHandler": "ModAPI.server.commandManager",

    # Input
    "net.minecraft.client.settings.KeyBinding": "ModAPI.KeyBinding",
    "org.lwjgl.input.Keyboard": "ModAPI.KeyBinding",
    "org.lwjgl.input.Mouse": "ModAPI.mouse",
})


# =============================================================================
# Method names (rewritten as `.name(` → `.target(`)
# =============================================================================

METHOD_NAMES: Mapping[str, str] = MappingProxyType({
    # Minecraft
    "getMinecraft": "minecraft",
    "displayGuiScreen": "displayGuiScreen",
    "loadWorld": "loadWorld",
    "setWorldAndResolution": "setWorldAndResolution",
    "refreshResources": "refreshResources",
    "getDebugFPS": "getFPS",

    # Player
    "sendChatMessage": "sendChatMessage",
    "addChatMessage": "$addChatComponentMessage",
    "getHeldItem": "$getHeldItem",
    "swingItem": "swingItem",
    "getPosition": "getPosition",
    "setPosition": "setPosition",
    "getDisplayName": "getDisplayName",

    # World
    "getBlockState": "getBlockState",
    "setBlockState": "setBlockState",
    "markBlockForUpdate": "markBlockForUpdate",
    "playSound": "playSound",
    "spawnParticle": "spawnParticle",
    "getChunkFromBlockCoords": "getChunkFromBlockCoords",
    "isAirBlock": "isAirBlock",

    # NBT
    "setString": "setString",
    "getString": "getString",
    "setInteger": "setInteger",
    "getInteger": "getInteger",
    "setTag": "setTag",
    "getTag": "getTag",
    "hasKey": "hasKey",

    # Network
    "sendPacket": "addToSendQueue",
    "addToSendQueue": "addToSendQueue",
    "sendToServer": "addToSendQueue",
    "sendToAll": "addToSendQueue",

    # Server
    "startServer": "startServer",
    "stopServer": "stopServer",
    "getServer": "getServer",
    "registerCommand": "registerCommand",
    "executeCommand": "executeCommand",

    # Wrapped Java accessors
    "drawString": "$drawStringWithShadow",
    "getHealth": "$getHealth",
    "getMaxHealth": "$getMaxHealth",
    "getCurrentItem": "$currentItem",
    "getStackInSlot": "$getStackInSlot",
    "getItem": "$getItem",
    "getMetadata": "$getMetadata",
    "setItemInUse": "$setItemInUse",
    "getDistanceToEntity": "$getDistanceToEntity",

    # Key bindings
    "isKeyDown": "isKeyDown",
    "isPressed": "isPressed",
    "getKeyCode": "getKeyCode",
    "getKeyDescription": "getKeyDescription",
    "getKeyCategory": "getKeyCategory",
    "setKeyBindState": "setKeyBindState",
    "getIsKeyPressed": "getIsKeyPressed",
})


# =============================================================================
# Event type names → EaglerForge event categories (exact match)
# =============================================================================

_EVENT_PACKAGES: Mapping[str, str] = MappingProxyType({
    # Client
    "TickEvent.PlayerTickEvent": "net.minecraftforge.fml.common.gameevent",
    "TickEvent.ClientTickEvent": "net.minecraftforge.fml.common.gameevent",
    "RenderWorldLastEvent": "net.minecraftforge.client.event",
    "RenderGameOverlayEvent": "net.minecraftforge.client.event",
    "ClientChatReceivedEvent": "net.minecraftforge.client.event",
    "ClientChatEvent": "net.minecraftforge.client.event",
    "GuiScreenEvent": "net.minecraftforge.client.event",
    "RenderHandEvent": "net.minecraftforge.client.event",
    "RenderLivingEvent": "net.minecraftforge.client.event",
    "RenderPlayerEvent": "net.minecraftforge.client.event",
    "FOVUpdateEvent": "net.minecraftforge.client.event",
    "MouseEvent": "net.minecraftforge.client.event",

    # World
    "WorldEvent": "net.minecraftforge.event.world",
    "ChunkEvent": "net.minecraftforge.event.world",
    "BlockEvent": "net.minecraftforge.event.world",
    "ChunkWatchEvent": "net.minecraftforge.event.world",

    # Server
    "FMLServerStartingEvent": "net.minecraftforge.fml.common.event",
    "FMLServerStoppingEvent": "net.minecraftforge.fml.common.event",
    "FMLServerStartedEvent": "net.minecraftforge.fml.common.event",
    "ServerChatEvent": "net.minecraftforge.event",
    "TickEvent.ServerTickEvent": "net.minecraftforge.fml.common.gameevent",

    # Player
    "PlayerEvent": "net.minecraftforge.event.entity.player",
    "PlayerInteractEvent": "net.minecraftforge.event.entity.player",
    "PlayerUseItemEvent": "net.minecraftforge.event.entity.player",
    "PlayerDropsEvent": "net.minecraftforge.event.entity.player",
    "PlayerSleepInBedEvent": "net.minecraftforge.event.entity.player",
    "PlayerWakeUpEvent": "net.minecraftforge.event.entity.player",

    # Commands
    "CommandEvent": "net.minecraftforge.event",

    # Bootstrap / init
    "FMLPreInitializationEvent": "net.minecraftforge.fml.common.event",
    "FMLInitializationEvent": "net.minecraftforge.fml.common.event",
    "FMLPostInitializationEvent": "net.minecraftforge.fml.common.event",
})

_SHORT_EVENTS = {
    "TickEvent.PlayerTickEvent": "tick",
    "TickEvent.ClientTickEvent": "tick",
    "RenderWorldLastEvent": "render",
    "RenderGameOverlayEvent": "render",
    "ClientChatReceivedEvent": "receivechatmessage",
    "ClientChatEvent": "sendchatmessage",
    "GuiScreenEvent": "frame",
    "RenderHandEvent": "render",
    "RenderLivingEvent": "render",
    "RenderPlayerEvent": "render",
    "FOVUpdateEvent": "frame",
    "MouseEvent": "frame",
    "WorldEvent": "load",
    "ChunkEvent": "load",
    "BlockEvent": "tick",
    "ChunkWatchEvent": "tick",
    "FMLServerStartingEvent": "serverstart",
    "FMLServerStoppingEvent": "serverstop",
    "FMLServerStartedEvent": "serverstart",
    "ServerChatEvent": "receivechatmessage",
    "TickEvent.ServerTickEvent": "tick",
    "PlayerEvent": "tick",
    "PlayerInteractEvent": "tick",
    "PlayerUseItemEvent": "tick",
    "PlayerDropsEvent": "tick",
    "PlayerSleepInBedEvent": "tick",
    "PlayerWakeUpEvent": "tick",
    "CommandEvent": "processcommand",
    "FMLPreInitializationEvent": "bootstrap",
    "FMLInitializationEvent": "load",
    "FMLPostInitializationEvent": "load",
}

# Short names first, then the same events spelled fully qualified
DIRECT_EVENTS: Mapping[str, str] = MappingProxyType({
    **_SHORT_EVENTS,
    **{f"{_EVENT_PACKAGES[short]}.{short}": category for short, category in _SHORT_EVENTS.items()},
})


# =============================================================================
# Required-module triggers (literal substrings of the full source)
# =============================================================================

MODULE_TRIGGERS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "player": (
        "EntityPlayerSP", "thePlayer", "player", "EntityPlayer",
        "sendChatMessage", "inventory", "getHeldItem",
        "PlayerEvent", "PlayerInteractEvent", "PlayerCapabilities",
    ),
    "world": (
        "World", "WorldClient", "theWorld", "Chunk", "WorldProvider",
        "setBlock", "getBlock", "loadChunk", "WorldEvent",
        "BlockPos", "IBlockAccess", "WorldType",
    ),
    "network": (
        "NetHandlerPlayClient", "sendPacket", "NetworkManager",
        "addToSendQueue", "Packet", "NetworkRegistry",
        "SimpleNetworkWrapper", "FMLEventChannel",
    ),
    "resolution": (
        "ScaledResolution", "displayWidth", "displayHeight",
        "getScaledWidth", "getScaledHeight", "getScaleFactor",
        "GuiScreen", "displayGuiScreen",
    ),
})


@dataclass(frozen=True)
class MappingTables:
    """Bundle of the lookup tables handed to each pipeline stage."""

    qualified_names: Mapping[str, str] = field(default_factory=lambda: QUALIFIED_NAMES)
    method_names: Mapping[str, str] = field(default_factory=lambda: METHOD_NAMES)
    direct_events: Mapping[str, str] = field(default_factory=lambda: DIRECT_EVENTS)
    module_triggers: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MODULE_TRIGGERS)


DEFAULT_TABLES = MappingTables()
