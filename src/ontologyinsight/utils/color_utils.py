# src/ontologyinsight/utils/color_utils.py
"""
提供與顏色處理相關的公用函式。
"""

import colorsys


def generate_color_palette(num_colors: int, start_hue: float = 0.7) -> list[str]:
    """使用黃金比例演算法生成一個視覺上可區分的、和諧的淺色調色盤。"""
    palette = []
    golden_ratio_conjugate = 0.61803398875
    hue = start_hue
    for _ in range(num_colors):
        hue += golden_ratio_conjugate
        hue %= 1
        rgb_float = colorsys.hls_to_rgb(hue, 0.9, 0.9)
        rgb_int = tuple(int(c * 255) for c in rgb_float)
        palette.append(f"#{rgb_int[0]:02x}{rgb_int[1]:02x}{rgb_int[2]:02x}")
    return palette


def get_analogous_dark_color(hex_color: str) -> str:
    """
    根據給定的十六進位背景色，計算一個相似的、更深的、醒目的邊框顏色。

    Args:
        hex_color: 十六進位顏色字串 (例如 "#RRGGBB")。

    Returns:
        一個相似深色的十六進位顏色字串。
    """
    hex_color = hex_color.lstrip("#")
    r, g, b = tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))

    hue, lightness, saturation = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)

    dark_l = max(0.1, lightness * 0.3)
    dark_s = min(1.0, saturation * 1.2)

    cr, cg, cb = colorsys.hls_to_rgb(hue, dark_l, dark_s)

    return f"#{int(cr * 255):02x}{int(cg * 255):02x}{int(cb * 255):02x}"
