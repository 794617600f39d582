WIDTH = 640
HEIGHT = 480
FPS = 60
WINDOW_TITLE = "Random Direction Enemy with Lives"

SPRITE_SIZE = 16
STAR_SIZE = 2
STAR_COUNT = 100

# Highest top-left coordinate that keeps a sprite fully on screen
MAX_X = WIDTH - SPRITE_SIZE
MAX_Y = HEIGHT - SPRITE_SIZE

PLAYER_START = (320, 240)
PLAYER_STEP = 2
PLAYER_LIVES = 3

ENEMY_START = (100, 100)
RETARGET_VELOCITY_RANGE = (-3.0, 3.0)
WALL_VELOCITY_RANGE = (-3.0, 6.0)
MOVE_LIMIT_RANGE = (10, 19)  # inclusive

HUD_FONT = "Consolas"
HUD_FONT_SIZE = 18
HUD_POS = (4, 4)

COLORS = {
    "bg": (0, 0, 0),
    "player": (255, 255, 255),
    "enemy": (255, 0, 0),
    "star": (255, 255, 255),
    "ui": (255, 255, 255),
}
