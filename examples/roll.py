"""Open an interactive window: click the die to roll it."""

from tetradie import DieAssembly, tetrahedron_vertices


def main():
    die = DieAssembly()
    die.build(tetrahedron_vertices())
    die.render_mpl_interactive()
    print(f"Final angle: {die.angle:.3f} rad")


if __name__ == "__main__":
    main()
