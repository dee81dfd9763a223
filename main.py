import sys
import tomllib

from core.calculator import TESTS, calculate
from core.config import configure_logging, load_settings
from plot import build_figure


def load_input(path: str) -> tuple[str, dict]:
    """Загрузить испытание и входные данные из TOML.

    Формат:
        test = "compaction"

        [inputs]
        wet_mass = 1800
        dry_mass = 1607
        water_content = 12
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)

    test = data.get("test")
    if test not in TESTS:
        raise ValueError(f"Unknown or missing test: {test!r}. Available: {', '.join(TESTS)}")
    inputs = data.get("inputs", {})
    if not isinstance(inputs, dict):
        raise ValueError("[inputs] must be a table")
    return test, inputs


def main(input_file: str = "input.toml") -> int:
    """Загрузка → расчёт → вывод → график."""
    settings = load_settings()
    configure_logging(settings)

    test, inputs = load_input(input_file)
    outcome = calculate(test, inputs)

    print(f"Test: {TESTS[test].title}")
    print(f"Standard: {TESTS[test].standard}")
    if not outcome.ok:
        print(f"{outcome.error.title}: {outcome.error.message}")
        return 1

    result = outcome.result
    width = max(len(label) for label, _ in result.rows())
    for label, value in result.rows():
        print(f"  {label:<{width}}  {value}")

    fig = build_figure(test, result, theme=settings.plot_theme)
    output_name = input_file.replace(".toml", ".html")
    if output_name == input_file:
        output_name += ".html"
    fig.write_html(output_name)
    print(f"Chart: {output_name}")

    return 0


if __name__ == "__main__":
    input_file = sys.argv[1] if len(sys.argv) > 1 else "input.toml"
    sys.exit(main(input_file))
