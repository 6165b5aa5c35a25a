"""Layout constants and color definitions."""

# Window
SCREEN_W = 1280
SCREEN_H = 720

# Projection
# Rest height of the player's top edge below the screen center.
PLAYER_REST_Y = 128
ROAD_Y = -100
ROAD_Z = -450
ROAD_DEPTH = 800
ISO_ANGLE_DEG = 45

# Colors
BG_COLOR = (235, 245, 250)
ROAD_COLOR = (135, 206, 235)
WALL_COLOR = (255, 165, 0)
PLAYER_COLOR = (170, 170, 180)
EDGE_COLOR = (0, 0, 0)
TEXT_COLOR = (20, 20, 30)
OVERLAY_COLOR = (0, 0, 0, 160)
OVERLAY_TEXT = (240, 240, 240)
