"""Catalogue of standard Vanessa Automation step templates"""

from typing import Dict, List, Optional

STANDARD_STEPS: Dict[str, Dict[str, List[str]]] = {
    "UI": {
        "ru": [
            'Я нажимаю на кнопку "<имя>"',
            'Я нажимаю на кнопку командного интерфейса "<имя>"',
            'Я выбираю значение "<значение>" в поле "<имя>"',
            'Я ввожу текст "<текст>" в поле "<имя>"',
            'Я устанавливаю флажок "<имя>"',
            'Я снимаю флажок "<имя>"',
            'Я перехожу к закладке "<имя>"',
            'Я открываю выпадающий список "<имя>"',
            'Я нажимаю на гиперссылку "<имя>"',
            'Я активизирую поле "<имя>"',
            'Я выбираю из списка "<имя>" по "<значение>"',
            'В таблице "<имя>" я нажимаю на кнопку "<кнопка>"',
            'В таблице "<имя>" я выбираю текущую строку',
            'В таблице "<имя>" я активизирую поле "<поле>"',
            "Я закрываю текущее окно",
            'Я жду закрытия окна "<имя>" в течение <секунд> секунд',
        ],
        "en": [
            'I click the button "<name>"',
            'I click command interface button "<name>"',
            'I select value "<value>" in field "<name>"',
            'I input text "<text>" in field "<name>"',
            'I set checkbox "<name>"',
            'I unset checkbox "<name>"',
            'I go to tab "<name>"',
            'I open dropdown list "<name>"',
            'I click hyperlink "<name>"',
            'I activate field "<name>"',
            'I select from list "<name>" by "<value>"',
            'In table "<name>" I click button "<button>"',
            'In table "<name>" I select current row',
            'In table "<name>" I activate field "<field>"',
            "I close current window",
            'I wait for window "<name>" to close for <seconds> seconds',
        ],
    },
    "Navigation": {
        "ru": [
            'Я открываю навигационную ссылку "<путь>"',
            'Я перехожу в раздел "<имя>"',
            'Я выбираю пункт меню "<имя>"',
            'Я открываю форму списка "<имя>"',
            'Я открываю форму элемента "<имя>"',
        ],
        "en": [
            'I open navigation link "<path>"',
            'I go to section "<name>"',
            'I select menu item "<name>"',
            'I open list form "<name>"',
            'I open item form "<name>"',
        ],
    },
    "Validation": {
        "ru": [
            'Тогда открылось окно "<имя>"',
            'И поле "<имя>" имеет значение "<значение>"',
            'И таблица "<имя>" содержит строки:',
            'И элемент "<имя>" доступен',
            'И элемент "<имя>" не доступен',
            'И я проверяю наличие элемента "<имя>"',
            'И появилось предупреждение "<текст>"',
        ],
        "en": [
            'Then window "<name>" opened',
            'And field "<name>" has value "<value>"',
            'And table "<name>" contains rows:',
            'And element "<name>" is available',
            'And element "<name>" is not available',
            'And I check element "<name>" exists',
            'And warning "<text>" appeared',
        ],
    },
    "Data": {
        "ru": [
            'Я создаю элемент справочника "<имя>"',
            'Я создаю документ "<имя>"',
            "Я провожу документ",
            "Я записываю элемент",
            "Я удаляю текущий элемент",
        ],
        "en": [
            'I create catalog item "<name>"',
            'I create document "<name>"',
            "I post document",
            "I save item",
            "I delete current item",
        ],
    },
}


def get_standard_steps(category: Optional[str] = None, language: str = "ru") -> List[str]:
    """Step templates for one category, or all of them when no category is given.

    Unknown languages fall back to Russian; unknown categories give no steps.
    """
    if category:
        categories = [STANDARD_STEPS[category]] if category in STANDARD_STEPS else []
    else:
        categories = list(STANDARD_STEPS.values())

    steps: List[str] = []
    for templates in categories:
        steps.extend(templates.get(language, templates["ru"]))
    return steps
