"""Java source fixtures shared by the test modules."""

COMBAT_HELPER = '''
@Mod(modid = "combathelper", version = "2.1", name = "Combat Helper")
public class CombatHelperMod {
    private static final KeyBinding TOGGLE_KEY = new KeyBinding("key.combathelper.toggle", Keyboard.KEY_P, "key.categories.combat");
    private boolean isEnabled = false;

    @SubscribeEvent
    public void onRender(RenderGameOverlayEvent event) {
        if (event.type != RenderGameOverlayEvent.ElementType.TEXT) {
            return;
        }

        EntityPlayerSP player = Minecraft.getMinecraft().thePlayer;
        if (player == null) return;

        ScaledResolution sr = new ScaledResolution(Minecraft.getMinecraft());
        FontRenderer fr = Minecraft.getMinecraft().fontRendererObj;

        fr.drawString("Combat Helper: " + (isEnabled ? "Enabled" : "Disabled"), 5, 5, 0xFFFFFF);
        fr.drawString("Health: " + (int)player.getHealth() + "/" + (int)player.getMaxHealth(), 5, 15, 0xFFFFFF);

        ItemStack held = player.getHeldItem();
        if (held != null && held.getItem() instanceof ItemSword) {
            fr.drawString("Sword Damage: +" + getItemDamage(held), 5, 25, 0xFFFFFF);
        }
    }

    @SubscribeEvent
    public void onTick(TickEvent.PlayerTickEvent event) {
        if (!isEnabled) return;

        EntityPlayerSP player = Minecraft.getMinecraft().thePlayer;
        if (player == null) return;

        if (player.getHealth() < 10.0f) {
            for (int i = 0; i < 9; i++) {
                ItemStack stack = player.inventory.getStackInSlot(i);
                if (stack != null && stack.getMetadata() == 16389) {
                    int prevSlot = player.inventory.currentItem;
                    player.inventory.currentItem = i;
                    Minecraft.getMinecraft().rightClickMouse();
                    player.inventory.currentItem = prevSlot;
                    break;
                }
            }
        }

        List<Entity> entities = player.worldObj.loadedEntityList;
        for (Entity entity : entities) {
            if (entity instanceof EntityPlayer && !entity.equals(player)) {
                double distance = player.getDistanceToEntity(entity);
                if (distance < 4.0 && player.getHeldItem() != null) {
                    player.setItemInUse(player.getHeldItem(), 72000);
                }
            }
        }
    }

    @SubscribeEvent
    public void onKey(InputEvent.KeyInputEvent event) {
        if (TOGGLE_KEY.isPressed()) {
            isEnabled = !isEnabled;
            String message = isEnabled ? "Combat Helper Enabled" : "Combat Helper Disabled";
            Minecraft.getMinecraft().thePlayer.addChatMessage(new ChatComponentText(message));
        }
    }

    private double getItemDamage(ItemStack stack) {
        double damage = 0.0;
        if (stack.getItem() instanceof ItemSword) {
            damage += ((ItemSword)stack.getItem()).getDamageVsEntity();
        }
        return damage;
    }
}
'''

NO_ANNOTATION = '''
public class PlainMod {
    @SubscribeEvent
    public void onOverlay(RenderGameOverlayEvent.Text event) {
        event.setCanceled(true);
    }
}
'''

NESTED_MODS = '''
@Mod(modid = "outer", description = "Outer mod")
public class Outer {
    @Mod(modid = "inner", version = "0.1")
    public static class Inner {
    }
}
'''

EDGE_SUBSCRIBERS = '''
package com.example.mod;

import net.minecraftforge.fml.common.Mod;

public abstract class EdgeMod {
    @SubscribeEvent
    public void noParameters() {
        doSomething();
    }

    @SubscribeEvent
    public abstract void noBody(TickEvent.ClientTickEvent event);

    @net.minecraftforge.fml.common.eventhandler.SubscribeEvent
    public void qualified(ClientChatReceivedEvent event) {
        event.setCanceled(true);
    }

    @Mod.EventHandler
    public void init(FMLInitializationEvent event) {
    }

    public void helper(RenderWorldLastEvent event) {
    }

    private final Runnable task = new Runnable() {
        @SubscribeEvent
        public void anonymous(WorldEvent.Load event) {
        }

        public void run() {
        }
    };
}
'''

RESOLUTION_ONLY = '''
@Mod(modid = "first")
public class First {
    private ScaledResolution sr;
}
'''

NETWORK_ONLY = '''
@Mod(modid = "second")
public class Second {
    private NetworkManager manager;
}
'''

BROKEN = '''
public class {
    void (
'''
