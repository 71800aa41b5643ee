"""
Builds single-scenario Russian feature files for Vanessa Automation.

Every intent is turned into a one feature / one scenario document that the
engine can run directly, e.g.:

    # language: ru
    Функционал: Действие с элементом
    Сценарий: Выполнение действия
      Когда Я нажимаю на элемент "Записать"
      И Пауза 1
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ScenarioValidationError, UnknownVariantError

ACTIONS = ("click", "input", "select", "check", "doubleclick", "rightclick")
WAIT_CONDITIONS = ("element", "text", "window", "time")
ASSERTION_TYPES = ("exists", "value", "enabled", "visible", "count")
NAVIGATION_TARGETS = ("back", "forward", "home", "refresh")


def _single_line(**params) -> None:
    """Every parameter must stay on its own step line"""
    for name, value in params.items():
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            text = str(item) if item is not None else ""
            if text and text.splitlines() != [text]:
                raise ScenarioValidationError(f"Line breaks are not allowed in {name}")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class ScenarioDraft:
    feature: str
    scenario: str
    steps: List[str] = field(default_factory=list)
    language: str = "ru"

    def render(self) -> str:
        lines = [
            f"# language: {self.language}",
            f"Функционал: {self.feature}",
            f"Сценарий: {self.scenario}",
        ]
        lines.extend(f"  {step}" for step in self.steps)
        return "\n".join(lines) + "\n"


class ScenarioBuilder:
    """Translate high-level UI intents into Gherkin scenarios"""

    def explore_form(self, form_name: str, depth: int = 2) -> ScenarioDraft:
        _single_line(form_name=form_name)
        return ScenarioDraft(
            feature="Исследование формы",
            scenario=f'Анализ формы "{form_name}"',
            steps=[
                f'Когда Я открываю форму "{form_name}"',
                f"И Я получаю список всех элементов формы с глубиной {depth}",
                "И Я сохраняю структуру формы в лог",
            ],
        )

    def get_elements(
        self,
        element_type: Optional[str] = None,
        parent_element: Optional[str] = None,
    ) -> ScenarioDraft:
        _single_line(element_type=element_type, parent_element=parent_element)
        step = "Я получаю список всех элементов текущей формы"
        if element_type:
            step = f'Я получаю список элементов типа "{element_type}"'
        if parent_element:
            step += f' в контейнере "{parent_element}"'

        return ScenarioDraft(
            feature="Получение элементов",
            scenario="Поиск элементов",
            steps=[f"Когда {step}", "И Я вывожу найденные элементы в лог"],
        )

    def perform_action(self, action: str, element: str, value: Optional[str] = None) -> ScenarioDraft:
        _single_line(element=element, value=value)
        if action == "click":
            step = f'Я нажимаю на элемент "{element}"'
        elif action == "doubleclick":
            step = f'Я делаю двойной клик на элемент "{element}"'
        elif action == "rightclick":
            step = f'Я делаю правый клик на элемент "{element}"'
        elif action == "input":
            if _is_blank(value):
                raise ScenarioValidationError("Value is required for input action")
            step = f'Я ввожу текст "{value}" в поле "{element}"'
        elif action == "select":
            if _is_blank(value):
                raise ScenarioValidationError("Value is required for select action")
            step = f'Я выбираю значение "{value}" в поле "{element}"'
        elif action == "check":
            step = f'Я устанавливаю флажок "{element}"'
        else:
            raise UnknownVariantError("action", action, ACTIONS)

        return ScenarioDraft(
            feature="Действие с элементом",
            scenario="Выполнение действия",
            steps=[f"Когда {step}", "И Пауза 1"],
        )

    def take_screenshot(
        self,
        screenshot_path: str,
        full_page: bool = False,
        element: Optional[str] = None,
    ) -> ScenarioDraft:
        _single_line(screenshot_path=screenshot_path, element=element)
        # Element capture wins over full page
        if element:
            step = f'Я делаю снимок элемента "{element}" и сохраняю в "{screenshot_path}"'
        elif full_page:
            step = f'Я делаю снимок всей страницы и сохраняю в "{screenshot_path}"'
        else:
            step = f'Я делаю снимок экрана "{screenshot_path}"'

        return ScenarioDraft(
            feature="Снимок экрана",
            scenario="Создание снимка",
            steps=[f"Когда {step}"],
        )

    def wait_for(self, condition: str, target: Optional[str] = None, timeout: int = 10) -> ScenarioDraft:
        _single_line(target=target)
        if condition not in WAIT_CONDITIONS:
            raise UnknownVariantError("wait condition", condition, WAIT_CONDITIONS)
        if condition != "time" and _is_blank(target):
            raise ScenarioValidationError(f"Target {condition} is required")

        if condition == "element":
            step = f'Я жду появления элемента "{target}" в течение {timeout} секунд'
        elif condition == "text":
            step = f'Я жду появления текста "{target}" в течение {timeout} секунд'
        elif condition == "window":
            step = f'Я жду открытия окна "{target}" в течение {timeout} секунд'
        else:
            step = f"Пауза {timeout}"

        return ScenarioDraft(
            feature="Ожидание",
            scenario="Ожидание условия",
            steps=[f"Когда {step}"],
        )

    def get_table_data(
        self,
        table_name: str,
        columns: Optional[List[str]] = None,
        row_count: Optional[int] = None,
    ) -> ScenarioDraft:
        _single_line(table_name=table_name, columns=columns)
        step = f'Я получаю данные из таблицы "{table_name}"'
        if columns:
            joined = '", "'.join(columns)
            step += f' для колонок "{joined}"'
        if row_count:
            step += f" первые {row_count} строк"

        return ScenarioDraft(
            feature="Извлечение данных",
            scenario="Получение данных таблицы",
            steps=[
                f"Когда {step}",
                'И Я сохраняю данные таблицы в переменную "tableData"',
                'И Я вывожу переменную "tableData" в лог',
            ],
        )

    def start_recording(self, name: str, recording_path: str) -> ScenarioDraft:
        _single_line(name=name, recording_path=recording_path)
        return ScenarioDraft(
            feature="Запись действий",
            scenario="Начало записи",
            steps=[
                f'Когда Я начинаю запись действий пользователя с именем "{name}"',
                f'И Я сохраняю запись в файл "{recording_path}"',
            ],
        )

    def assert_condition(self, assertion_type: str, element: str, expected: Optional[str] = None) -> ScenarioDraft:
        _single_line(element=element, expected=expected)
        if assertion_type == "exists":
            step = f'Тогда элемент "{element}" существует'
        elif assertion_type == "value":
            if _is_blank(expected):
                raise ScenarioValidationError("Expected value is required for value assertion")
            step = f'Тогда поле "{element}" имеет значение "{expected}"'
        elif assertion_type == "enabled":
            step = f'Тогда элемент "{element}" доступен'
        elif assertion_type == "visible":
            step = f'Тогда элемент "{element}" видимый'
        elif assertion_type == "count":
            if _is_blank(expected):
                raise ScenarioValidationError("Expected count is required for count assertion")
            step = f'Тогда количество элементов "{element}" равно {expected}'
        else:
            raise UnknownVariantError("assertion type", assertion_type, ASSERTION_TYPES)

        return ScenarioDraft(
            feature="Проверка",
            scenario="Проверка условия",
            steps=[step],
        )

    def navigate(self, target: str) -> ScenarioDraft:
        steps = {
            "back": 'Я нажимаю кнопку "Назад" в браузере',
            "forward": 'Я нажимаю кнопку "Вперед" в браузере',
            "home": "Я перехожу на главную страницу",
            "refresh": "Я обновляю страницу",
        }
        if target not in steps:
            raise UnknownVariantError("navigation target", target, NAVIGATION_TARGETS)

        return ScenarioDraft(
            feature="Навигация",
            scenario="Переход",
            steps=[f"Когда {steps[target]}"],
        )
