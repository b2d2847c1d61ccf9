"""
Diagnostics — Консольная диагностика поверх logging и rich

Аналоги console.log / console.dir / console.table / console.trace:
все вызовы идут в logger "core" на уровне INFO, вывод в stderr через
RichHandler.

До вызова configure_console_handler у logger "core" нет handler, а
logging.lastResort выводит только WARNING и выше: log/log_object/log_table/
log_stack ничего не печатают, пока handler не подключён.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

PROJECT_LOGGER = "core"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Конфигурация консольного вывода."""

    # Минимальный уровень для handler
    level: int = logging.INFO

    # False отключает цвет (color_system=None)
    color: bool = True

    # Показывать файл:строку источника записи
    show_path: bool = False


# =============================================================================
# LOGGING SETUP
# =============================================================================


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Logger в пространстве имён проекта.

    Args:
        name: Дочернее имя ("text" -> "core.text"); None: корневой logger проекта
    """
    if name is None:
        return logging.getLogger(PROJECT_LOGGER)
    return logging.getLogger(f"{PROJECT_LOGGER}.{name}")


def configure_console_handler(config: DiagnosticsConfig | None = None) -> RichHandler:
    """
    Создание RichHandler для вывода в stderr и подключение к logger проекта.

    Повторный вызов заменяет ранее подключённые RichHandler, а не дублирует их.

    Args:
        config: конфигурация (опционально, используется default)

    Returns:
        Подключённый handler
    """
    config = config or DiagnosticsConfig()

    console = Console(color_system="auto" if config.color else None, stderr=True)
    handler = RichHandler(
        level=config.level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=config.show_path,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = get_logger()
    for existing in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(config.level)

    return handler


# =============================================================================
# CONSOLE-STYLE ВЫВОД
# =============================================================================


def log(*data: Any) -> None:
    """Аналог console.log: аргументы через пробел."""
    get_logger().info(" ".join(str(item) for item in data))


def log_object(item: Any = None, max_depth: int | None = None) -> None:
    """
    Аналог console.dir: pretty-представление объекта.

    Args:
        item: Объект для вывода
        max_depth: Ограничение глубины вложенности (None: без ограничения)
    """
    console = Console(width=100, color_system=None)
    with console.capture() as capture:
        console.print(Pretty(item, max_depth=max_depth))
    get_logger().info(capture.get().rstrip("\n"))


def log_table(
    tabular_data: Iterable[Mapping[str, Any]],
    properties: Sequence[str] | None = None,
) -> None:
    """
    Аналог console.table: таблица из последовательности словарей.

    Колонки: объединение ключей в порядке первого появления, либо properties,
    если они заданы. Первая колонка содержит индекс строки.

    Args:
        tabular_data: Строки таблицы
        properties: Подмножество колонок (optional)
    """
    rows = list(tabular_data)

    if properties is None:
        columns: list[str] = []
        for row in rows:
            for key in row:
                if key not in columns:
                    columns.append(key)
    else:
        columns = list(properties)

    # Text вместо str: значения выводятся буквально, без разбора rich markup
    table = Table()
    for header in ["(index)", *columns]:
        table.add_column(Text(str(header)))
    for index, row in enumerate(rows):
        table.add_row(Text(str(index)), *(Text(str(row[c]) if c in row else "") for c in columns))

    console = Console(width=120, color_system=None)
    with console.capture() as capture:
        console.print(table)
    get_logger().info(capture.get().rstrip("\n"))


def log_stack(*data: Any) -> None:
    """Аналог console.trace: сообщение плюс стек вызова."""
    get_logger().info(" ".join(str(item) for item in data), stack_info=True, stacklevel=2)
