"""Single rays against a circle and a rectangle.

Demonstrates: Scene, march, MarchConfig (parity and corrected modes)
Output:       examples/single_ray_example.png

Geometric identities verified:
    Circle at (400, 150) r=50, camera (300, 150), angle 0  -> hit at x = 350
    Rectangle (10, -5) 20x10, camera (0, 0), angle 0       -> hit at x = 10
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from raymarch2d import Circle, MarchConfig, Point, Rectangle, Scene, march

_OUT = os.path.join(os.path.dirname(__file__), "single_ray_example.png")


def _render_png(cases, out_path):
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle as CirclePatch
        from matplotlib.patches import Rectangle as RectPatch
    except ImportError:
        print("  matplotlib not available, skipping PNG")
        return

    fig, axes = plt.subplots(1, len(cases), figsize=(5 * len(cases), 4), facecolor="#111")
    for ax, (title, camera, scene, result, view) in zip(axes, cases):
        ax.set_facecolor("#1e1e1e"); ax.set_aspect("equal")
        ax.set_xlim(*view[0]); ax.set_ylim(view[1][1], view[1][0])
        for s in scene:
            if isinstance(s, Circle):
                ax.add_patch(CirclePatch((s.origin.x, s.origin.y), s.radius, color="black"))
            else:
                ax.add_patch(RectPatch((s.origin.x, s.origin.y), s.width, s.height, color="black"))
        for wp in result.waypoints:
            ax.add_patch(CirclePatch((wp.point.x, wp.point.y), max(wp.radius, 0.0),
                                     fill=False, edgecolor="#666"))
        if result.hit is not None:
            ax.plot(result.hit.position.x, result.hit.position.y, "o", color="#ffb400")
        ax.plot(camera.x, camera.y, "o", color="#9b9b9b")
        ax.set_title(title, color="white", fontsize=10)
    plt.savefig(out_path, dpi=150, bbox_inches="tight", facecolor="#111")
    plt.close()
    print(f"  Saved: {out_path}")


def main():
    print("=" * 60)
    print("SINGLE RAYS: sphere tracing toward angle 0")
    print("=" * 60)

    cfg = MarchConfig()
    cases = []
    ok = True

    camera = Point(300, 150)
    scene = Scene([Circle(Point(400, 150), 50)], cfg.max_vision_distance)
    result = march(camera, 0.0, scene, cfg)
    print(f"\nCircle:    {result.termination} after {result.iterations} step(s) at {result.hit.position}")
    ok &= result.hit is not None and abs(result.hit.position.x - 350.0) < 1e-6
    cases.append(("Circle", camera, scene, result, ((250, 500), (50, 250))))

    camera = Point(0, 0)
    scene = Scene([Rectangle(Point(10, -5), 20, 10)], cfg.max_vision_distance)
    result = march(camera, 0.0, scene, cfg)
    print(f"Rectangle: {result.termination} after {result.iterations} step(s) at {result.hit.position}")
    ok &= result.hit is not None and abs(result.hit.position.x - 10.0) < 1e-6
    cases.append(("Rectangle", camera, scene, result, ((-10, 40), (-20, 20))))

    # --- open space: parity exhausts the budget, corrected leaves the range ---
    empty = Scene([], cfg.max_vision_distance)
    parity = march(Point(0, 0), 30.0, empty, cfg)
    corrected = march(Point(0, 0), 30.0, empty, MarchConfig(mode="corrected"))
    print(f"\nOpen space (parity):    {parity.termination} after {parity.iterations} steps")
    print(f"Open space (corrected): {corrected.termination} after {corrected.iterations} step(s)")
    ok &= parity.iterations == cfg.max_depth_search and corrected.termination == "far"

    print("\n" + ("PASSED" if ok else "FAILED"))

    _render_png(cases, _OUT)


if __name__ == "__main__":
    main()
