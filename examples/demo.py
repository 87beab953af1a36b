"""Demo script: build a die from a mesh buffer, roll it, and render it."""

from pathlib import Path

from tetradie import DieAssembly, DieStyle, tetrahedron_position_buffer

OUTPUT_DIR = Path(__file__).resolve().parent


def main():
    style = DieStyle(show_label_markers=True)
    die = DieAssembly.from_position_buffer(tetrahedron_position_buffer(), style)
    for placement in die.placements:
        print(
            f"Face {placement.text}: position {tuple(placement.position)}, "
            f"euler {placement.orientation.to_euler()}"
        )

    die.render_mpl(OUTPUT_DIR / "die_rest.png", show=False)

    # Half a roll at 60 fps.
    die.tick(1 / 60, clicked=True)
    for _ in range(89):
        die.tick(1 / 60)
    print(f"Angle after 1.5 s: {die.angle:.3f} rad, rolling: {die.state.is_rotating}")
    die.render_mpl(OUTPUT_DIR / "die_half_roll.png", show=False)


if __name__ == "__main__":
    main()
