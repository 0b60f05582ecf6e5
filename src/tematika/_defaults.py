"""Built-in root sets used when a topic dictionary resource is unavailable."""

from ._types import Topic

DEFAULT_ROOTS: dict[Topic, frozenset[str]] = {
    Topic.MEDICINE: frozenset({
        "врач", "болезн", "лечен", "пациент", "диагноз", "симптом",
        "терап", "хирург", "анализ", "рецепт", "медикамент", "госпитал",
    }),
    Topic.HISTORY: frozenset({
        "истор", "век", "эпох", "войн", "импер", "государств",
        "революц", "древн", "цивилизац", "археолог",
    }),
    Topic.PROGRAMMING: frozenset({
        "код", "программ", "алгоритм", "функц", "класс", "метод",
        "переменн", "цикл", "массив", "компилятор", "отладк",
    }),
    Topic.NETWORKS: frozenset({
        "сет", "протокол", "сервер", "клиент", "маршрутизац",
        "ip", "tcp", "dns", "firewall", "пакет",
    }),
    Topic.CRYPTOGRAPHY: frozenset({
        "шифр", "ключ", "дешифр", "криптограф", "хеш",
        "блокчейн", "алгоритм", "rsa", "aes", "подпис",
    }),
    Topic.FINANCE: frozenset({
        "финанс", "банк", "кредит", "инвестиц", "акц", "бирж",
        "капитал", "процент", "депозит", "валют",
    }),
}
