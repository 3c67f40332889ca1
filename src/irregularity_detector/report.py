import sys

NAME_WIDTH = 40


def _section(title, stream):
    print("", file=stream)
    print(f"------ {title} ------", file=stream)
    print("", file=stream)


def _metrics(result):
    if result.inconclusive:
        return f"{'inconclusive':<25} {'':>6}"
    return (
        f"{result.entropy:>8.4f} "
        f"{result.irregularity_score:>16.10f} "
        f"{f'0x{result.irregularity_byte:02X}':>6}"
    )


def _chi_square(result):
    if result.chi_square is None:
        return f"{'N/A':>12} {'N/A':>10}"
    return f"{result.chi_square:>12.2f} {result.p_value:>10.3e}"


def print_report(results, stream=None):
    """Prints the all-files, generic and signature groups as text tables."""
    stream = stream if stream is not None else sys.stdout
    header = f"{'Filename':<{NAME_WIDTH}} {'Size (B)':>10} {'Entropy':>8} {'Irregularity':>16} {'Byte':>6}"

    _section("All Files", stream)
    print(f"{header} {'Chi2 Stat':>12} {'Chi2 PVal':>10}", file=stream)
    print("-" * 110, file=stream)
    for classification in results.all_files:
        result = classification.result
        line = f"{result.file_name:<{NAME_WIDTH}} {result.total_bytes:>10} {_metrics(result)}"
        if not result.inconclusive:
            line += f" {_chi_square(result)}"
        print(line, file=stream)

    _section("Generic Detections", stream)
    print(f"{header} Rules", file=stream)
    print("-" * 110, file=stream)
    for classification in results.generic:
        result = classification.result
        rules = ", ".join(classification.generic_rules)
        print(f"{result.file_name:<{NAME_WIDTH}} {result.total_bytes:>10} {_metrics(result)} {rules}", file=stream)

    _section("Signature Detections", stream)
    print(f"{'Signature':<16} {header}", file=stream)
    print("-" * 110, file=stream)
    for classification in results.signature:
        result = classification.result
        for name in result.matched_signatures:
            print(f"{name:<16} {result.file_name:<{NAME_WIDTH}} {result.total_bytes:>10} {_metrics(result)}", file=stream)

    if results.failures:
        _section("Unreadable Files", stream)
        for error in results.failures:
            print(f"{error.path}: {error.reason}", file=stream)
