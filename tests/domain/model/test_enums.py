from __future__ import annotations

import pytest

from docmatrix.domain.model import ObligationLevel


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (None, ObligationLevel.MANDATORY),
        ("", ObligationLevel.MANDATORY),
        ("Obrigatório", ObligationLevel.MANDATORY),
        ("mandatory", ObligationLevel.MANDATORY),
        ("Eliminatório", ObligationLevel.ELIMINATORY),
        ("Requerido pelo Cliente", ObligationLevel.CLIENT_REQUIRED),
        ("client_required", ObligationLevel.CLIENT_REQUIRED),
        ("Recomendado", ObligationLevel.RECOMMENDED),
        ("Desejável", ObligationLevel.RECOMMENDED),
        ("Opcional", ObligationLevel.RECOMMENDED),
        (ObligationLevel.ELIMINATORY, ObligationLevel.ELIMINATORY),
    ],
)
def test_obligation_parse(text: str | ObligationLevel | None, expected: ObligationLevel) -> None:
    assert ObligationLevel.parse(text) is expected


def test_obligation_parse_rejects_unknown_text() -> None:
    with pytest.raises(ValueError, match="Unknown obligation level"):
        ObligationLevel.parse("talvez")
