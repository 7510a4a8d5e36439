from __future__ import annotations

import sqlite3
from typing import Dict, List, Optional

from .db import _connect, new_id, now_iso
from .errors import ConflictError, NotFoundError
from .logs import LoggerFactory


logger = LoggerFactory.get_logger("atuapj.repositories")


def _where(filters: Dict[str, Optional[str]]) -> tuple[str, list[object]]:
    q = " WHERE 1=1"
    params: list[object] = []
    for column, value in filters.items():
        if value is not None:
            q += f" AND {column} = ?"
            params.append(value)
    return q, params


def _fetch_all(sql: str, params) -> List[sqlite3.Row]:
    conn = _connect()
    try:
        return conn.execute(sql, params).fetchall()
    finally:
        conn.close()


def _fetch_one(sql: str, params) -> Optional[sqlite3.Row]:
    conn = _connect()
    try:
        return conn.execute(sql, params).fetchone()
    finally:
        conn.close()


def _write(sql: str, params) -> int:
    """Executa um INSERT/UPDATE/DELETE e devolve o número de linhas afetadas."""
    conn = _connect()
    try:
        cur = conn.execute(sql, params)
        conn.commit()
        return cur.rowcount
    finally:
        conn.close()


class MemberPaymentRepository:
    _COLUMNS = "id, user_id, company_id, valor, mes, created_at, updated_at"

    def _row(self, row: sqlite3.Row) -> Dict[str, object]:
        out = dict(row)
        out["valor"] = float(out["valor"])
        return out

    def list(
        self,
        *,
        user_id: Optional[str] = None,
        company_id: Optional[str] = None,
        mes: Optional[str] = None,
    ) -> List[Dict[str, object]]:
        where, params = _where({"user_id": user_id, "company_id": company_id, "mes": mes})
        rows = _fetch_all(f"SELECT {self._COLUMNS} FROM member_payments{where} ORDER BY created_at, id", params)
        return [self._row(r) for r in rows]

    def get(self, payment_id: str) -> Optional[Dict[str, object]]:
        row = _fetch_one(f"SELECT {self._COLUMNS} FROM member_payments WHERE id = ?", (payment_id,))
        return self._row(row) if row else None

    def find_by_user_company_month(self, user_id: str, company_id: str, mes: str) -> Optional[Dict[str, object]]:
        rows = self.list(user_id=user_id, company_id=company_id, mes=mes)
        return rows[0] if rows else None

    def create(self, *, user_id: str, company_id: str, valor: float, mes: str) -> Dict[str, object]:
        if self.find_by_user_company_month(user_id, company_id, mes):
            logger.warning("Pagamento duplicado: user=%s company=%s mes=%s", user_id, company_id, mes)
            raise ConflictError("Já existe um pagamento registrado para este membro neste mês")
        payment_id = new_id("mp")
        now = now_iso()
        try:
            _write(
                """
                INSERT INTO member_payments (id, user_id, company_id, valor, mes, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (payment_id, user_id, company_id, float(valor), mes, now, now),
            )
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Já existe um pagamento registrado para este membro neste mês") from exc
        logger.info("Pagamento %s criado (user=%s company=%s mes=%s)", payment_id, user_id, company_id, mes)
        return self.get(payment_id)  # type: ignore[return-value]

    def update(self, payment_id: str, *, valor: Optional[float] = None) -> Dict[str, object]:
        current = self.get(payment_id)
        if not current:
            logger.warning("Pagamento %s não encontrado para atualização", payment_id)
            raise NotFoundError("Pagamento não encontrado")
        new_valor = current["valor"] if valor is None else float(valor)
        _write(
            "UPDATE member_payments SET valor = ?, updated_at = ? WHERE id = ?",
            (new_valor, now_iso(), payment_id),
        )
        return self.get(payment_id)  # type: ignore[return-value]

    def create_or_update(self, *, user_id: str, company_id: str, mes: str, valor: float) -> Dict[str, object]:
        existing = self.find_by_user_company_month(user_id, company_id, mes)
        if existing:
            return self.update(str(existing["id"]), valor=valor)
        return self.create(user_id=user_id, company_id=company_id, valor=valor, mes=mes)

    def delete(self, payment_id: str) -> None:
        if _write("DELETE FROM member_payments WHERE id = ?", (payment_id,)) == 0:
            raise NotFoundError("Pagamento não encontrado")
        logger.info("Pagamento %s removido", payment_id)


class MemberProjectHoursRepository:
    _COLUMNS = "id, company_id, user_id, projeto_id, max_hours, created_at, updated_at"

    def _row(self, row: sqlite3.Row) -> Dict[str, object]:
        out = dict(row)
        out["max_hours"] = float(out["max_hours"])
        return out

    def list(
        self,
        *,
        company_id: Optional[str] = None,
        user_id: Optional[str] = None,
        projeto_id: Optional[str] = None,
    ) -> List[Dict[str, object]]:
        where, params = _where({"company_id": company_id, "user_id": user_id, "projeto_id": projeto_id})
        rows = _fetch_all(
            f"SELECT {self._COLUMNS} FROM member_project_hours_limits{where} ORDER BY created_at, id",
            params,
        )
        return [self._row(r) for r in rows]

    def get(self, limit_id: str) -> Optional[Dict[str, object]]:
        row = _fetch_one(f"SELECT {self._COLUMNS} FROM member_project_hours_limits WHERE id = ?", (limit_id,))
        return self._row(row) if row else None

    def find_by_user_and_project(self, user_id: str, projeto_id: str) -> Optional[Dict[str, object]]:
        rows = self.list(user_id=user_id, projeto_id=projeto_id)
        return rows[0] if rows else None

    def create(self, *, company_id: str, user_id: str, projeto_id: str, max_hours: float) -> Dict[str, object]:
        if self.find_by_user_and_project(user_id, projeto_id):
            logger.warning("Teto de horas duplicado: user=%s projeto=%s", user_id, projeto_id)
            raise ConflictError("Já existe um teto de horas definido para este membro neste projeto")
        limit_id = new_id("mph")
        now = now_iso()
        try:
            _write(
                """
                INSERT INTO member_project_hours_limits
                    (id, company_id, user_id, projeto_id, max_hours, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (limit_id, company_id, user_id, projeto_id, float(max_hours), now, now),
            )
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Já existe um teto de horas definido para este membro neste projeto") from exc
        logger.info("Teto de horas %s criado (user=%s projeto=%s)", limit_id, user_id, projeto_id)
        return self.get(limit_id)  # type: ignore[return-value]

    def update(self, limit_id: str, *, max_hours: Optional[float] = None) -> Dict[str, object]:
        current = self.get(limit_id)
        if not current:
            logger.warning("Teto de horas %s não encontrado para atualização", limit_id)
            raise NotFoundError("Limite não encontrado")
        new_max = current["max_hours"] if max_hours is None else float(max_hours)
        _write(
            "UPDATE member_project_hours_limits SET max_hours = ?, updated_at = ? WHERE id = ?",
            (new_max, now_iso(), limit_id),
        )
        return self.get(limit_id)  # type: ignore[return-value]

    def delete(self, limit_id: str) -> None:
        if _write("DELETE FROM member_project_hours_limits WHERE id = ?", (limit_id,)) == 0:
            raise NotFoundError("Limite não encontrado")
        logger.info("Teto de horas %s removido", limit_id)

    def delete_by_user_and_project(self, user_id: str, projeto_id: str) -> bool:
        limit = self.find_by_user_and_project(user_id, projeto_id)
        if not limit:
            return False
        self.delete(str(limit["id"]))
        return True


class UserCompanySettingsRepository:
    _COLUMNS = (
        "id, user_id, company_id, horista, limite_mensal_horas, contato, cpf, created_at, updated_at"
    )
    _NULLABLE = ("limite_mensal_horas", "contato", "cpf")

    def _row(self, row: sqlite3.Row) -> Dict[str, object]:
        out = dict(row)
        out["horista"] = bool(out["horista"])
        if out["limite_mensal_horas"] is not None:
            out["limite_mensal_horas"] = float(out["limite_mensal_horas"])
        return out

    def list(self, *, company_id: Optional[str] = None, user_id: Optional[str] = None) -> List[Dict[str, object]]:
        where, params = _where({"company_id": company_id, "user_id": user_id})
        rows = _fetch_all(f"SELECT {self._COLUMNS} FROM user_company_settings{where} ORDER BY created_at, id", params)
        return [self._row(r) for r in rows]

    def get(self, settings_id: str) -> Optional[Dict[str, object]]:
        row = _fetch_one(f"SELECT {self._COLUMNS} FROM user_company_settings WHERE id = ?", (settings_id,))
        return self._row(row) if row else None

    def find_by_user_and_company(self, user_id: str, company_id: str) -> Optional[Dict[str, object]]:
        rows = self.list(user_id=user_id, company_id=company_id)
        return rows[0] if rows else None

    def create(
        self,
        *,
        user_id: str,
        company_id: str,
        horista: bool,
        limite_mensal_horas: Optional[float] = None,
        contato: Optional[str] = None,
        cpf: Optional[str] = None,
    ) -> Dict[str, object]:
        if self.find_by_user_and_company(user_id, company_id):
            logger.warning("Configuração duplicada: user=%s company=%s", user_id, company_id)
            raise ConflictError("Já existe configuração para este usuário nesta empresa")
        settings_id = new_id("ucs")
        now = now_iso()
        # limite mensal só é guardado para horista
        limite = limite_mensal_horas if horista else None
        try:
            _write(
                """
                INSERT INTO user_company_settings
                    (id, user_id, company_id, horista, limite_mensal_horas, contato, cpf, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (settings_id, user_id, company_id, 1 if horista else 0, limite, contato, cpf, now, now),
            )
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Já existe configuração para este usuário nesta empresa") from exc
        logger.info("Configuração %s criada (user=%s company=%s)", settings_id, user_id, company_id)
        return self.get(settings_id)  # type: ignore[return-value]

    def update(self, settings_id: str, changes: Dict[str, object]) -> Dict[str, object]:
        """Aplica um patch parcial.

        Campos ausentes ficam como estão; None limpa apenas as colunas opcionais
        (limite, contato, cpf). Ao virar não-horista o limite mensal é removido.
        """
        current = self.get(settings_id)
        if not current:
            logger.warning("Configuração %s não encontrada para atualização", settings_id)
            raise NotFoundError("Configuração não encontrada")

        merged = dict(current)
        for key, value in changes.items():
            if key not in merged or key in ("id", "user_id", "company_id", "created_at", "updated_at"):
                continue
            if value is None and key not in self._NULLABLE:
                continue
            merged[key] = value
        if changes.get("horista") is False:
            merged["limite_mensal_horas"] = None

        _write(
            """
            UPDATE user_company_settings
            SET horista = ?, limite_mensal_horas = ?, contato = ?, cpf = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                1 if merged["horista"] else 0,
                merged["limite_mensal_horas"],
                merged["contato"],
                merged["cpf"],
                now_iso(),
                settings_id,
            ),
        )
        return self.get(settings_id)  # type: ignore[return-value]

    def delete(self, settings_id: str) -> None:
        if _write("DELETE FROM user_company_settings WHERE id = ?", (settings_id,)) == 0:
            raise NotFoundError("Configuração não encontrada")
        logger.info("Configuração %s removida", settings_id)

    def delete_by_user_and_company(self, user_id: str, company_id: str) -> bool:
        setting = self.find_by_user_and_company(user_id, company_id)
        if not setting:
            return False
        self.delete(str(setting["id"]))
        return True
