"""
Raw-SQL receipt dialects.

Two receipt stores cannot be paginated through the structured query path:
their execution layer rejects LIMIT/OFFSET over a filtered, windowed join.
Each store is described once by a DialectSchema (tables, join shape,
column mapping); the windowed builder and the predicate compiler are
written against the descriptor, never against a specific store.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ReceiptColumns(BaseModel):  # type: ignore[misc]
    """Physical columns behind each receipt filter."""

    model_config = ConfigDict(frozen=True)

    emitter_rfc: str
    receiver_rfc: str
    series: str
    folio: str
    issue_date: str
    document_type: str
    total: str


class DialectSchema(BaseModel):  # type: ignore[misc]
    """
    Descriptor of one raw-SQL receipt store.

    Attributes:
        name: Human-readable dialect name (used in logs).
        from_clause: Base table joined to its companion table.
        count_column: Column counted with COUNT(DISTINCT ...).
        cte_name: Name of the ranking common table expression.
        projection: Select list of the CTE, each item aliased to the
            shared receipt column names.
        columns: Physical columns used by filters and ordering.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    from_clause: str
    count_column: str
    cte_name: str
    projection: tuple[str, ...]
    columns: ReceiptColumns


HADES_SCHEMA = DialectSchema(
    name="hades",
    from_clause=(
        "hades_cfdi_3_2_comprobantes AS comprobantes "
        "INNER JOIN hades_sealed_cfdis AS cfdis "
        "ON cfdis.id = comprobantes.document_id"
    ),
    count_column="cfdis.id",
    cte_name="hades_results",
    projection=(
        "comprobantes.document_id AS document_id",
        "comprobantes.client_id AS client_id",
        "comprobantes.receipt_serie AS receipt_serie",
        "comprobantes.receipt_folio AS receipt_folio",
        "comprobantes.rfc_emitter AS rfc_emitter",
        "comprobantes.rfc_receiver AS rfc_receiver",
        "comprobantes.status AS status",
        "comprobantes.issue_date AS issue_date",
        "comprobantes.receipt_type AS receipt_type",
        "comprobantes.total AS total",
        "cfdis.uuid AS uuid",
    ),
    columns=ReceiptColumns(
        emitter_rfc="comprobantes.rfc_emitter",
        receiver_rfc="comprobantes.rfc_receiver",
        series="comprobantes.receipt_serie",
        folio="comprobantes.receipt_folio",
        issue_date="comprobantes.issue_date",
        document_type="comprobantes.receipt_type",
        total="comprobantes.total",
    ),
)

CFD_SCHEMA = DialectSchema(
    name="cfd",
    from_clause="CFD AS cfdis INNER JOIN EMPRESA AS e ON e.idInternal = cfdis.Empresa_Id",
    count_column="cfdis.idInternal",
    cte_name="results",
    projection=(
        "cfdis.idInternal AS document_id",
        "cfdis.Empresa_Id AS client_id",
        "cfdis.serie AS receipt_serie",
        "cfdis.folio AS receipt_folio",
        "e.rfc AS rfc_emitter",
        "cfdis.rfc AS rfc_receiver",
        "cfdis.vigente AS status",
        "cfdis.fechaGeneracion AS issue_date",
        "cfdis.tipoDeComprobante AS receipt_type",
        "cfdis.montoTotal AS total",
        "cfdis.idInternal AS uuid",
    ),
    columns=ReceiptColumns(
        emitter_rfc="e.rfc",
        receiver_rfc="cfdis.rfc",
        series="cfdis.serie",
        folio="cfdis.folio",
        issue_date="cfdis.fechaGeneracion",
        document_type="cfdis.tipoDeComprobante",
        total="cfdis.montoTotal",
    ),
)


class Dialect(str, Enum):
    """Closed set of raw-SQL receipt dialects."""

    HADES = "hades"
    CFD = "cfd"

    @property
    def schema(self) -> DialectSchema:
        return _SCHEMAS[self]


_SCHEMAS: dict[Dialect, DialectSchema] = {
    Dialect.HADES: HADES_SCHEMA,
    Dialect.CFD: CFD_SCHEMA,
}
