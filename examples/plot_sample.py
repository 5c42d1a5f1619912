"""Render a sample set with its r/2 disks to out/sample.png."""

from bluenoise import poisson_disc, make_source
from bluenoise.viz import save_plot


def main() -> None:
    pts = poisson_disc(make_source(7), 200.0, 120.0, 8.0)
    out = save_plot("out/sample.png", pts, 200.0, 120.0, r=8.0, show_disks=True)
    print("[plot_sample] wrote", out)


if __name__ == "__main__":
    main()
