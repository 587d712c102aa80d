"""
Dollhouse — Global Configuration
"""

# --- Display ---
SCREEN_WIDTH: int = 640
SCREEN_HEIGHT: int = 400
WINDOW_SCALE: int = 2                # Integer upscale of the 640x400 canvas
FPS: int = 60
HUD_HEIGHT: int = 96                 # Text + bars strip below the house

# --- Simulation Timers (real seconds) ---
NEEDS_TICK_SECONDS: float = 5.0      # Clock + needs decay
DECISION_TICK_SECONDS: float = 4.0   # Idle agent picks a new activity
ANIMATION_TICK_SECONDS: float = 1.0 / 60.0  # Movement, action timers, dog
RANDOM_SEED: int = 1985

# --- Clock ---
DEFAULT_SPEED_MULTIPLIER: float = 600.0  # 10 simulated minutes per needs tick
START_MINUTE: float = 8 * 60             # Day 1 starts at 08:00
BEDTIME_MINUTE: int = 22 * 60
WAKETIME_MINUTE: int = 7 * 60
NIGHT_START_HOUR: int = 22
NIGHT_END_HOUR: int = 6
MORNING_HOURS: tuple = (6, 10)       # [start, end)
EVENING_HOURS: tuple = (18, 22)

# --- Needs ---
INITIAL_HUNGER: float = 75.0
INITIAL_ENERGY: float = 85.0
HUNGER_DECAY: float = 1.5            # Per needs tick while awake
ENERGY_DECAY: float = 0.8
NIGHT_DECAY_MULTIPLIER: float = 0.5
SLEEP_ENERGY_GAIN: float = 1.5       # Per needs tick while asleep
SLEEP_HUNGER_DECAY: float = 0.5
BEDTIME_ENERGY_THRESHOLD: float = 70.0

# --- Decision Engine ---
CRITICAL_HUNGER: float = 20.0
CRITICAL_ENERGY: float = 15.0
NIGHT_SLEEP_ENERGY: float = 50.0
CRITICAL_PRIORITY: float = 150.0
BEDTIME_PRIORITY: float = 200.0
STRESS_MULTIPLIER: float = 1.5
HUNGER_THRESHOLD_BASE: float = 30.0  # hunger_threshold = base + tolerance * spread
HUNGER_THRESHOLD_SPREAD: float = 40.0
ENERGY_THRESHOLD_BASE: float = 25.0
ENERGY_THRESHOLD_SPREAD: float = 40.0
WANDER_PRIORITY_SPREAD: float = 20.0

# --- Movement ---
ARRIVAL_THRESHOLD: float = 3.0
BASE_WALK_SPEED: float = 2.5
EASE_OUT_DISTANCE: float = 20.0
DIRECTION_DEAD_ZONE: float = 0.5
URGENT_HUNGER: float = 30.0
URGENCY_SPEED_BONUS: float = 1.2

# --- Companion ---
DOG_WATER_RADIUS: float = 20.0
DOG_REST_RADIUS: float = 20.0
DOG_DRINK_CHANCE: float = 0.01
DOG_DRINK_EXIT_CHANCE: float = 0.02
DOG_WAKE_RADIUS: float = 30.0        # Agent this close wakes a resting dog
DOG_WAKE_WALKING_RADIUS: float = 60.0
DOG_REST_COOLDOWN: int = 600         # Animation ticks before the bed is tempting again
DOG_DRINK_COOLDOWN: int = 900
DOG_CATCHUP_DISTANCE: float = 100.0
DOG_TROT_DISTANCE: float = 60.0
DOG_WALK_DISTANCE: float = 35.0
DOG_IDLE_DISTANCE: float = 25.0
DOG_CATCHUP_SPEED: float = 2.5
DOG_TROT_SPEED: float = 1.5
DOG_WALK_SPEED: float = 0.5
DOG_IDLE_CHANCE: float = 0.05
DOG_PLAY_TICKS: int = 120
DOG_PLAY_RADIUS: float = 18.0
DOG_HAPPY_TICKS: int = 300           # How long a player interaction keeps the dog happy

# --- Dwelling Bounds ---
HOUSE_MIN_X: float = 30.0
HOUSE_MAX_X: float = 610.0
HOUSE_MIN_Y: float = 100.0
HOUSE_MAX_Y: float = 350.0

# --- Events ---
EVENT_HISTORY_CAP: int = 200
