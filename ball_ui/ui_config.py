WINDOW_WIDTH = 375
WINDOW_HEIGHT = 667
MIN_WINDOW_WIDTH = 240
MIN_WINDOW_HEIGHT = 320
MAX_WINDOW_WIDTH = 2800
MAX_WINDOW_HEIGHT = 2800
FPS_MS = 16

BALL_BORDER_WIDTH = 3
SPRING_FREQUENCY = 8.0
TRASH_BURST_COUNT = 22
PARTICLE_TTL = (0.35, 0.7)
PARTICLE_SPEED = (1.2, 3.8)

THEME_ORDER = ("Daylight", "Night", "Paper")

THEMES = {
    "Daylight": {
        "bg": "#f8fafc",
        "hud_text": "#0f172a",
        "ball_border": "#111827",
        "can_body": (148, 163, 184, 255),
        "can_lid": (100, 116, 139, 255),
        "can_stripe": (71, 85, 105, 255),
        "guide_inside": "#22c55e",
        "guide_band": "#f59e0b",
        "particle": ["#94a3b8", "#64748b", "#cbd5e1"],
    },
    "Night": {
        "bg": "#0f172a",
        "hud_text": "#e2e8f0",
        "ball_border": "#f8fafc",
        "can_body": (71, 85, 105, 255),
        "can_lid": (148, 163, 184, 255),
        "can_stripe": (30, 41, 59, 255),
        "guide_inside": "#4ade80",
        "guide_band": "#fbbf24",
        "particle": ["#e2e8f0", "#93c5fd", "#a5b4fc"],
    },
    "Paper": {
        "bg": "#fef3c7",
        "hud_text": "#422006",
        "ball_border": "#422006",
        "can_body": (180, 83, 9, 255),
        "can_lid": (146, 64, 14, 255),
        "can_stripe": (120, 53, 15, 255),
        "guide_inside": "#15803d",
        "guide_band": "#b91c1c",
        "particle": ["#fcd34d", "#fb923c", "#fde68a"],
    },
}
