"""
Colors shared by the Arcade window and the rgb_array renderer
"""

SKY_C = (0x80, 0xA0, 0xC0)
GROUND_C = (0x93, 0xB6, 0x5F)
GOPHER_C = (0x6A, 0xD7, 0xE5)
GOPHER_EYE_C = (0x20, 0x20, 0x20)
COIN_C = (0xF0, 0xD2, 0x50)
HUD_C = (0xFF, 0xFF, 0xFF)

LIFE_ICON_SIZE = 28  # 14 px sprite * 2
HUD_MARGIN = 10
