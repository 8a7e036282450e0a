"""
Game constants for the Snake arcade simulation.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen orientation: y grows downwards
DIRECTION_VECTORS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Level substates
GET_READY = "GET_READY"
PLAYING = "PLAYING"
STUNNED = "STUNNED"
DYING = "DYING"
GAME_OVER = "GAME_OVER"

# Snake tuning (speed is in ticks per second)
INITIAL_LENGTH = 3
INITIAL_SPEED = 5.0
MAX_SPEED = 10.0
SPEED_INCREMENT = 0.1
STUN_INTERVAL = 0.5

# Total duration of the shrink-out; split evenly over the body length
DYING_DURATION_SHORT = 0.3
DYING_DURATION_LONG = 0.8
SHORT_BODY_THRESHOLD = 5

# Apple settings
SPAWN_INTERVAL = 2.0
MAX_APPLES = 3
APPLE_START_ALPHA = 0.25
APPLE_FADE_STEP = 0.01
MAX_SPAWN_ATTEMPTS = 100

# Grid fade-in
GRID_FRAME_INTERVAL = 1.0 / 60.0
GRID_FADE_SPEED = 0.02
GRID_ALPHA = 0.7
GRID_ALPHA_STAGGER = 0.05

# Sound cues
CUE_GET_READY = "get_ready"
CUE_MOVE = "move"
CUE_EAT = "eat"
CUE_DEAD = "dead"

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_OPPONENT = "opponent"
DEATH_HEAD_COLLISION = "head_collision"
