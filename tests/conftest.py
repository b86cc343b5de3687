"""
Pytest fixtures for holiday tests.
"""

from pathlib import Path
from typing import List, Tuple

import pytest


@pytest.fixture
def holidays_2018() -> List[Tuple[str, str]]:
    """Reference holidays for 2018 as (DD/MM/YYYY, name), in rule order."""
    return [
        ("01/01/2018", "Año Nuevo"),
        ("08/01/2018", "Día de los Reyes Magos"),
        ("19/03/2018", "Día de San José"),
        ("29/03/2018", "Jueves Santo"),
        ("30/03/2018", "Viernes Santo"),
        ("01/05/2018", "Día del Trabajo"),
        ("14/05/2018", "Ascensión del Señor"),
        ("04/06/2018", "Corpus Christi"),
        ("11/06/2018", "Sagrado Corazón de Jesús"),
        ("02/07/2018", "San Pedro y San Pablo"),
        ("20/07/2018", "Día de la Independencia"),
        ("07/08/2018", "Batalla de Boyacá"),
        ("20/08/2018", "La Asunción de la Virgen"),
        ("15/10/2018", "Día de la Raza"),
        ("05/11/2018", "Todos los Santos"),
        ("12/11/2018", "Independencia de Cartagena"),
        ("08/12/2018", "Día de la Inmaculada Concepción"),
        ("25/12/2018", "Día de Navidad"),
    ]


@pytest.fixture
def rules_file(tmp_path: Path):
    """Fixture writing a rule table YAML into a temporary directory.

    Args:
        tmp_path: pytest's built-in tmp_path fixture

    Returns:
        Callable taking the YAML text and returning the file path
    """

    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
