"""Demo: two spherical segments of a 5 m sphere, computed without prompting."""

from spheresegments import Measurement, evaluate_segments


def main():
    # ── Measurements (heights from the sphere centre) ─────────────
    segments = [
        Measurement(R=5.0, ha=4.0, hb=3.0),
        Measurement(R=5.0, ha=5.0, hb=0.5),  # reaches the pole
    ]

    # ── Compute + accumulate ──────────────────────────────────────
    summary = evaluate_segments(segments)
    summary.print_results()

    print()
    summary.print_averages()


if __name__ == "__main__":
    main()
