from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from atuapj_client.core.models import Configuracoes


@dataclass
class AppState:
    """Estado compartilhado da sessão desktop."""

    current_user_id: Optional[str] = None
    current_company_id: Optional[str] = None
    configuracoes: Configuracoes = field(default_factory=Configuracoes.default)
