"""Ошибки расчёта.

Таксономия:
- InvalidInput: поле не заполнено или не является числом;
- DomainError: число корректно, но нарушает физическое ограничение (LL ≤ PL и т.п.).

Обе ошибки обрабатываются одинаково: расчёт прерывается до изменения
отображаемого результата, пользователь видит уведомление.
"""


class CalculationError(Exception):
    """Базовая ошибка калькулятора с текстом для уведомления."""

    title = "Calculation Error"

    def __init__(self, message: str, title: str | None = None):
        super().__init__(message)
        self.message = message
        if title is not None:
            self.title = title


class InvalidInput(CalculationError):
    """Обязательное поле пустое или не число."""

    title = "Invalid Input"

    def __init__(self, message: str, fields: list[str] | None = None, title: str | None = None):
        super().__init__(message, title=title)
        self.fields = list(fields or [])


class DomainError(CalculationError):
    """Значение нарушает физическое ограничение."""

    title = "Invalid Values"
