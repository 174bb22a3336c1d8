"""
Game, environment and window configuration for Gopher Rain
"""

# Gameplay parameters (GameState keyword arguments)
GAME_CONFIG = {
    "screen_width": 640,
    "screen_height": 480,
    "ground_height": 20,
    "player_width": 14 * 3.5,   # sprite pixels * scale
    "player_height": 14 * 3.5,
    "player_speed": 450.0,      # px/s
    "coin_width": 54.0,
    "coin_height": 54.0,
    "coin_spawn_y": -100.0,     # above the top edge
    "coin_fall_speed": 100.0,   # px/s
    "max_coins": 10,
    "spawn_period": 1.5,        # seconds between spawns
    "start_lives": 3,
    "lives_enabled": True,
}

# Environment parameters (GopherRainEnv keyword arguments)
ENV_CONFIG = {
    **GAME_CONFIG,
    "dt": 1 / 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
}

# Interactive window
WINDOW_CONFIG = {
    "title": "Gopher Rain",
    "dt": 1 / 60,
}

EVAL_CONFIG = {
    "n_episodes": 10,
    "seed": 42,
}
