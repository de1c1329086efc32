import pandas as pd
from config import settings
from randtest.analysis.symbolizer import Mode

def tail_phrase(p: float, low=None, high=None) -> str:
    low = settings.report.low_tail if low is None else low
    high = settings.report.high_tail if high is None else high
    if p < low:
        return "less than 0.01 percent"
    if p > high:
        return "more than 99.99 percent"
    return f"{p * 100:1.2f} percent"

def _fraction(count, total):
    return count / total if total else 0.0

def _char_of(value, mode):
    if mode is Mode.BIT or value < 0x20 or value > 0x7E:
        return " "
    return chr(value)

def render_counts(report) -> str:
    lines = ["Value Char Occurrences Fraction"]
    for value, count in enumerate(report.counts):
        if count:
            lines.append(
                f"{value:3d}   {_char_of(value, report.mode)}   {count:10d}   "
                f"{_fraction(count, report.symbol_count):f}"
            )
    lines.append("")
    lines.append(f"Total:    {report.symbol_count:10d}   {_fraction(report.symbol_count, report.symbol_count):f}")
    return "\n".join(lines) + "\n\n"

def render_human(report, counts=False) -> str:
    unit = report.mode.unit
    out = []
    if counts:
        out.append(render_counts(report))

    out.append(f"Entropy = {report.entropy:f} bits per {unit}.\n")
    out.append(
        f"Chi square distribution for {report.symbol_count} samples is {report.chi_square:1.2f}, and randomly\n"
        f"would exceed this value {tail_phrase(report.chi_square_p)} of the times.\n\n"
    )
    out.append(
        f"Arithmetic mean value of data {unit}s is {report.mean:1.4f} "
        f"({report.mean_reference:.1f} = random).\n"
    )
    if report.monte_carlo_pi is None:
        out.append("Monte Carlo value for Pi is undefined (fewer than 6 bytes).\n")
    else:
        out.append(
            f"Monte Carlo value for Pi is {report.monte_carlo_pi:1.9f} "
            f"(error {report.pi_error_percent:1.2f} percent).\n"
        )
    if report.serial_correlation is None:
        out.append("Serial correlation coefficient is undefined (all values equal!).\n")
    else:
        out.append(
            f"Serial correlation coefficient is {report.serial_correlation:1.6f} "
            "(totally uncorrelated = 0.0).\n"
        )
    return "".join(out)

def summary_frame(report, undefined_scc=None) -> pd.DataFrame:
    undefined_scc = settings.report.undefined_scc if undefined_scc is None else undefined_scc
    size_column = "File-bits" if report.mode is Mode.BIT else "File-bytes"
    pi = float("nan") if report.monte_carlo_pi is None else report.monte_carlo_pi
    scc = undefined_scc if report.serial_correlation is None else report.serial_correlation
    return pd.DataFrame(
        [[1, report.symbol_count, report.entropy, report.chi_square, report.mean, pi, scc]],
        columns=["0", size_column, "Entropy", "Chi-square", "Mean", "Monte-Carlo-Pi", "Serial-Correlation"],
    )

def counts_frame(report) -> pd.DataFrame:
    rows = [
        [3, value, count, _fraction(count, report.symbol_count)]
        for value, count in enumerate(report.counts)
    ]
    return pd.DataFrame(rows, columns=["2", "Value", "Occurrences", "Fraction"])

def render_terse(report, counts=False, undefined_scc=None) -> str:
    frames = [summary_frame(report, undefined_scc)]
    if counts:
        frames.append(counts_frame(report))
    return "".join(
        frame.to_csv(index=False, float_format="%f", na_rep="nan", lineterminator="\n")
        for frame in frames
    )
