"""Plain-text report of a SURD decomposition."""

from typing import List, Mapping, Sequence

from torchsurd.decomposition import SurdResult


def format_variables(variables: Sequence[int]) -> str:
    """Display names of source variables.

    Examples
    --------
    >>> format_variables((1, 3))
    'S1, S3'
    >>> format_variables(())
    'Target'
    """
    if not variables:
        return "Target"
    return ", ".join(f"S{i}" for i in variables)


def _strong(values: Mapping, threshold: float) -> list:
    # Strongest first; ties broken by key for a stable report.
    return sorted(
        ((key, value) for key, value in values.items() if value > threshold),
        key=lambda item: (-item[1], item[0]),
    )


def surd_report(
    result: SurdResult,
    *,
    synergy_threshold: float = 0.5,
    unique_threshold: float = 0.5,
    redundancy_threshold: float = 0.5,
    leak_threshold: float = 0.5,
) -> List[str]:
    """Summarize the strong influences found by :func:`surd_states`.

    Parameters
    ----------
    result : SurdResult
        Decomposition to summarize.
    synergy_threshold, unique_threshold, redundancy_threshold : float, default=0.5
        Minimum information, in bits, for an influence to be reported.
        Influences equal to the threshold are not reported.
    leak_threshold : float, default=0.5
        Information leak above which unobserved factors are flagged.

    Returns
    -------
    list of str
        Report lines.

    Examples
    --------
    >>> from torchsurd import surd_states
    >>> xor = torch.zeros(2, 2, 2, dtype=torch.float64)
    >>> xor[0, 0, 0] = xor[0, 1, 1] = xor[1, 0, 1] = xor[1, 1, 0] = 0.25
    >>> lines = surd_report(surd_states(xor))
    >>> lines[0]
    '--- Causal Analysis Report ---'
    >>> lines[5]
    '  Strong synergy from {S1, S2}: 1.000 bits.'
    """
    if not isinstance(result, SurdResult):
        raise TypeError(
            f"result must be a SurdResult, got {type(result).__name__}"
        )

    for name, value in (
        ("synergy_threshold", synergy_threshold),
        ("unique_threshold", unique_threshold),
        ("redundancy_threshold", redundancy_threshold),
        ("leak_threshold", leak_threshold),
    ):
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")

    lines = ["--- Causal Analysis Report ---"]

    lines.append(f"Information Leak: {result.info_leak:.3f}")
    if result.info_leak > leak_threshold:
        lines.append(
            "  (High information leak suggests significant unobserved "
            "factors or randomness.)"
        )
    else:
        lines.append(
            "  (Low information leak suggests observed factors explain most "
            "of the target's behavior.)"
        )

    sections = (
        ("Synergistic", "synergy", "synergistic",
         result.synergistic_info, synergy_threshold),
        ("Unique", "unique influence", "unique",
         result.unique_info, unique_threshold),
        ("Redundant", "redundant influence", "redundant",
         result.redundant_info, redundancy_threshold),
    )

    for title, noun, adjective, values, threshold in sections:
        lines.append("")
        lines.append(f"{title} influences:")
        strong = _strong(values, threshold)
        if not strong:
            lines.append(
                f"  No strong {adjective} influences found above threshold."
            )
        for key, value in strong:
            lines.append(
                f"  Strong {noun} from {{{format_variables(key)}}}: "
                f"{value:.3f} bits."
            )

    return lines
