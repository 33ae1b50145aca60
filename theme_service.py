from dataclasses import dataclass


@dataclass(frozen=True)
class ColorTheme:
    name: str
    primary: str  # main accent (buttons, icons)
    secondary: str  # gradients
    glow: str
    primary_rgb: str


THEMES = {
    # Indigo/Purple
    "north_america": ColorTheme("Indigo Future", "#818cf8", "#a78bfa", "rgba(99, 102, 241, 0.6)", "129, 140, 248"),
    # Emerald/Teal
    "europe": ColorTheme("Emerald Shield", "#34d399", "#2dd4bf", "rgba(16, 185, 129, 0.6)", "52, 211, 153"),
    # Red/Amber
    "asia": ColorTheme("Crimson Data", "#f87171", "#fbbf24", "rgba(239, 68, 68, 0.6)", "248, 113, 113"),
    # Orange/Yellow
    "south_america": ColorTheme("Solar Flare", "#fb923c", "#facc15", "rgba(249, 115, 22, 0.6)", "251, 146, 60"),
    # Cyan, also used for Oceania and anything unrecognised
    "default": ColorTheme("Cyber Cyan", "#22d3ee", "#06b6d4", "rgba(6, 182, 212, 0.6)", "34, 211, 238"),
}

MODES = ("default", "alternate")

# slate-50 .. slate-900 as "r g b"
PALETTES = {
    "default": [
        "248 250 252", "241 245 249", "226 232 240", "203 213 225", "148 163 184",
        "100 116 139", "71 85 105", "51 65 85", "30 41 59", "15 23 42",
    ],
    # deep black / zinc
    "alternate": [
        "250 250 250", "244 244 245", "228 228 231", "212 212 216", "161 161 170",
        "113 113 122", "82 82 91", "63 63 70", "39 39 42", "9 9 11",
    ],
}

_PALETTE_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

_NORTH_AMERICA_ZONES = ("America/New_York", "America/Los_Angeles", "America/Chicago", "America/Toronto")
_SOUTH_AMERICA_CITIES = ("Sao_Paulo", "Buenos_Aires", "Bogota")


def detect_theme(timezone):
    if not timezone:
        return THEMES["default"]
    if timezone.startswith(_NORTH_AMERICA_ZONES):
        return THEMES["north_america"]
    if timezone.startswith("Europe/") or any(city in timezone for city in ("London", "Paris", "Berlin")):
        return THEMES["europe"]
    if timezone.startswith("Asia/") or any(city in timezone for city in ("Tokyo", "Shanghai", "Kolkata")):
        return THEMES["asia"]
    if any(city in timezone for city in _SOUTH_AMERICA_CITIES):
        return THEMES["south_america"]
    return THEMES["default"]


def toggle_mode(mode):
    return "alternate" if mode == "default" else "default"


def palette_variables(mode):
    palette = PALETTES.get(mode, PALETTES["default"])
    return {f"--slate-{step}": value for step, value in zip(_PALETTE_STEPS, palette)}


def theme_css(theme, mode="default"):
    variables = {
        "--primary-color": theme.primary,
        "--secondary-color": theme.secondary,
        "--glow-color": theme.glow,
        "--primary-rgb": theme.primary_rgb,
        **palette_variables(mode),
    }
    declarations = "\n".join(f"            {name}: {value};" for name, value in variables.items())
    return f"""
    <style>
        :root {{
{declarations}
        }}
        .stApp {{
            background-color: rgb(var(--slate-900));
            color: rgb(var(--slate-200));
        }}
        .text-dynamic {{
            color: var(--primary-color);
        }}
        .tool-card {{
            border: 1px solid rgb(var(--slate-700));
            border-radius: 10px;
            padding: 20px;
            margin-bottom: 15px;
            background-color: rgb(var(--slate-800));
            box-shadow: 0px 2px 4px rgba(0,0,0,0.3);
        }}
        .tool-card:hover {{
            border-color: var(--primary-color);
            box-shadow: 0 0 12px var(--glow-color);
        }}
        .tool-title {{
            font-size: 20px;
            font-weight: bold;
            color: rgb(var(--slate-100));
        }}
        .tool-description {{
            font-size: 15px;
            color: rgb(var(--slate-400));
            margin: 10px 0;
        }}
        .tool-meta {{
            font-size: 13px;
            color: rgb(var(--slate-500));
        }}
        .stButton>button {{
            background-color: var(--primary-color);
            color: rgb(var(--slate-900));
            border: none;
            border-radius: 5px;
        }}
        .stButton>button:hover {{
            background-color: var(--secondary-color);
            color: rgb(var(--slate-900));
        }}
        .footer {{
            text-align: center;
            color: rgb(var(--slate-500));
            font-size: 0.9em;
            margin-top: 40px;
            border-top: 1px solid rgb(var(--slate-800));
            padding-top: 12px;
        }}
    </style>
"""
