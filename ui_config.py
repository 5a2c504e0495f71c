# ui_config.py

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 420
HEADING_SPACING = 24

CSS_DATA = """
/* 页面 */
.page { padding: 32px; }
.page-heading { font-size: 28px; font-weight: 800; margin-bottom: 8px; }

/* 彩虹: transition 在两种状态下都存在，隐藏 -> 显示时才会渐变 */
.rainbow-arc {
    opacity: 1;
    transition: opacity 1s ease;
}
.rainbow-arc.rainbow-hidden { opacity: 0; }
"""
