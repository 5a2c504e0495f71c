import logging
import os
import sys

from PIL import Image, ImageDraw

from app_errors import classify_exception, user_message
from app_logging import setup_logging
from fade_in import Visibility
from rainbow import render_container
from spectrum import SPECTRUM, arc_specs, canvas_frame, hex_to_rgb

logger = logging.getLogger(__name__)

# ================= 配置 =================
# PNG 预览宽度 (高度按画布比例计算)
SIZES = [77, 154, 308, 616]
SUPERSAMPLE = 4
SVG_NAME = "rainbow.svg"
# =======================================


def render_png(width):
    """Rasterize the rainbow at the given pixel width with Pillow."""
    frame = canvas_frame()
    scale = width / frame.width * SUPERSAMPLE
    big = Image.new("RGBA", (round(frame.width * scale), round(frame.height * scale)), (0, 0, 0, 0))
    draw = ImageDraw.Draw(big)
    for entry, spec in zip(SPECTRUM, arc_specs()):
        stroke = max(1, round(spec.stroke_width * scale))
        # Pillow grows the stroke inwards from the box, so pad by half a stroke.
        outer = spec.radius * scale + stroke / 2.0
        cx = spec.center_x * scale
        cy = spec.center_y * scale
        box = [cx - outer, cy - outer, cx + outer, cy + outer]
        draw.arc(box, start=180, end=360, fill=hex_to_rgb(entry.color) + (255,), width=stroke)
    height = max(1, round(frame.height * width / frame.width))
    return big.resize((width, height), Image.Resampling.LANCZOS)


def generate_pngs(output_dir):
    print("🖼️  Generating PNG previews...")
    written = []
    for size in SIZES:
        output_path = os.path.join(output_dir, f"rainbow-{size}.png")
        render_png(size).save(output_path, "PNG")
        print(f"   ✅ Generated {size}px: {output_path}")
        written.append(output_path)
    return written


def generate_svg(output_dir, visibility=Visibility.VISIBLE):
    print("📐 Generating SVG...")
    output_path = os.path.join(output_dir, SVG_NAME)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(render_container(visibility).to_svg(standalone=True))
    print(f"   ✅ Generated SVG: {output_path}")
    return output_path


def _parse_state(raw):
    for state in Visibility:
        if raw.strip().lower() == state.value:
            return state
    return None


def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print("❌ Error: Missing output directory argument.")
        print("Usage: python3 export_rainbow.py <output_dir> [hidden|visible]")
        return 1

    output_dir = argv[0]
    visibility = Visibility.VISIBLE
    if len(argv) > 1:
        visibility = _parse_state(argv[1])
        if visibility is None:
            print(f"❌ Error: Unknown state '{argv[1]}', expected hidden or visible.")
            return 1

    try:
        os.makedirs(output_dir, exist_ok=True)
        generate_svg(output_dir, visibility)
        generate_pngs(output_dir)
    except (OSError, ValueError) as e:
        kind = classify_exception(e)
        logger.warning("Rainbow export to %s failed (%s): %s", output_dir, kind, e)
        print(f"❌ {user_message(kind, 'export')}")
        return 1

    print("\n🎉 Rainbow exported successfully!")
    return 0


def cli():
    setup_logging()
    return main()


if __name__ == "__main__":
    sys.exit(cli())
