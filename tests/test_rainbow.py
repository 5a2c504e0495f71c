import re
import xml.etree.ElementTree as ET

from fade_in import PendingFrame, Visibility
from rainbow import RainbowArc, build_arcs, render_container

EXPECTED_COLORS = ["#FF0000", "#FF7F00", "#FFFF00", "#00FF00", "#0000FF", "#4B0082", "#9400D3"]
ARC_RADIUS_RE = re.compile(r"A\s+([\d.]+)\s+([\d.]+)")


class FakeScheduler:
    def __init__(self):
        self.handles = []

    def request(self, callback):
        handle = PendingFrame(callback)
        self.handles.append(handle)
        return handle

    def run_frame(self):
        for handle in list(self.handles):
            handle.fire()

    @property
    def active(self):
        return [h for h in self.handles if h.active]


def test_mount_renders_hidden_accessible_container():
    rainbow = RainbowArc(FakeScheduler())
    container = rainbow.mount()
    assert container.opacity == 0
    assert container.style["opacity"] == "0"
    assert container.role == "img"
    assert container.aria_label == "Decorative rainbow"
    assert container.test_id == "rainbow-arc"
    assert len(container.children) == 7
    assert [c.stroke for c in container.children] == EXPECTED_COLORS


def test_children_are_unfilled_arcs_with_stroke_width_8():
    for child in build_arcs():
        attrs = child.attributes()
        assert attrs["stroke-width"] == "8"
        assert attrs["fill"] == "none"
        assert attrs["d"].startswith("M")
        assert "A" in attrs["d"]


def test_arc_radii_step_down_from_150_to_90():
    radii = [float(ARC_RADIUS_RE.search(c.d).group(1)) for c in build_arcs()]
    assert radii == [150.0, 140.0, 130.0, 120.0, 110.0, 100.0, 90.0]


def test_trigger_makes_container_visible():
    sched = FakeScheduler()
    rainbow = RainbowArc(sched)
    updates = []
    rainbow.connect_changed(updates.append)
    rainbow.mount()
    assert rainbow.visibility is Visibility.HIDDEN
    sched.run_frame()
    container = rainbow.render()
    assert rainbow.visibility is Visibility.VISIBLE
    assert container.style["opacity"] == "1"
    assert "opacity" in container.style["transition"]
    assert "1s" in container.style["transition"]
    assert [u.opacity for u in updates] == [1]


def test_unmount_before_trigger_leaves_no_pending_callback():
    sched = FakeScheduler()
    rainbow = RainbowArc(sched)
    updates = []
    rainbow.connect_changed(updates.append)
    rainbow.mount()
    rainbow.unmount()
    assert sched.active == []
    assert rainbow.pending is False
    sched.run_frame()
    assert rainbow.render().opacity == 0
    assert updates == []


def test_remount_starts_a_fresh_fade():
    sched = FakeScheduler()
    rainbow = RainbowArc(sched)
    rainbow.mount()
    sched.run_frame()
    rainbow.unmount()
    container = rainbow.mount()
    assert container.opacity == 0
    assert rainbow.visibility is Visibility.HIDDEN
    assert len(sched.active) == 1
    sched.run_frame()
    assert rainbow.render().opacity == 1


def test_svg_markup_contract():
    svg = render_container(Visibility.HIDDEN).to_svg()
    root = ET.fromstring(svg)
    assert root.tag == "svg"
    assert root.get("data-testid") == "rainbow-arc"
    assert root.get("role") == "img"
    assert root.get("aria-label") == "Decorative rainbow"
    min_x, min_y, width, height = (float(p) for p in root.get("viewBox").split())
    assert (min_x, min_y) == (0, 0)
    assert width >= 300 and height >= 150
    assert root.get("width") == "308"
    assert root.get("height") == "154"
    style = root.get("style")
    assert "display: block" in style
    assert "margin: 0 auto" in style
    assert "opacity: 0" in style
    assert "transition: opacity 1s" in style
    paths = root.findall("path")
    assert [p.get("stroke") for p in paths] == EXPECTED_COLORS
    assert {p.get("stroke-width") for p in paths} == {"8"}
    assert {p.get("fill") for p in paths} == {"none"}


def test_standalone_svg_declares_namespace():
    svg = render_container(Visibility.VISIBLE).to_svg(standalone=True)
    assert svg.startswith("<?xml")
    root = ET.fromstring(svg.split("\n", 1)[1])
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert "opacity: 1" in root.get("style")
