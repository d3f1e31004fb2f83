"""Tests for the Supabase key-value store."""

from dataclasses import dataclass, field

from food_lookup.adapters.supabase_kv_store import SupabaseKeyValueStore
from food_lookup.services.history import HistoryTracker
from tests.conftest import FakeClock


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    """Fluent table fake backed by a dict of rows keyed by ``key``."""

    name: str
    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    _action: str = "select"
    _payload: dict[str, object] | None = None
    _filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args: str) -> "FakeTable":
        return self._start("select")

    def upsert(self, payload: dict[str, object]) -> "FakeTable":
        self._start("upsert")
        self._payload = payload
        return self

    def delete(self) -> "FakeTable":
        return self._start("delete")

    def eq(self, column: str, value: object) -> "FakeTable":
        self._filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        keys = [value for column, value in self._filters if column == "key"]
        if self._action == "upsert" and self._payload is not None:
            self.rows[str(self._payload["key"])] = dict(self._payload)
            return FakeResponse(data=[self._payload])
        if self._action == "delete":
            for key in keys:
                self.rows.pop(str(key), None)
            return FakeResponse(data=[])
        return FakeResponse(
            data=[self.rows[str(key)] for key in keys if str(key) in self.rows]
        )

    def _start(self, action: str) -> "FakeTable":
        self.calls.append(action)
        self._action = action
        self._payload = None
        self._filters = []
        return self


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_store_set_get_remove() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client, table_name="food_kv")

    store.set("history:recent", b'[{"query": "oats"}]')
    value = store.get("history:recent")
    store.remove("history:recent")

    table = client.tables["food_kv"]
    assert value == b'[{"query": "oats"}]'
    assert store.get("history:recent") is None
    assert table.calls == ["upsert", "select", "delete", "select"]


def test_supabase_store_upsert_payload() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    store.set("barcode:123", b"{}")

    row = client.tables["kv_store"].rows["barcode:123"]
    assert row["value"] == "{}"
    assert "updated_at" in row


def test_supabase_store_ignores_null_values() -> None:
    client = FakeSupabaseClient()
    client.table("kv_store").rows["k"] = {"key": "k", "value": None}

    assert SupabaseKeyValueStore(client).get("k") is None


def test_history_persists_through_supabase_store(clock: FakeClock) -> None:
    client = FakeSupabaseClient()
    HistoryTracker(SupabaseKeyValueStore(client), clock=clock).record_search(
        "greek yogurt", 12
    )

    reloaded = HistoryTracker(SupabaseKeyValueStore(client), clock=clock)

    assert [item.query for item in reloaded.recent_searches()] == ["greek yogurt"]
    assert reloaded.trending_terms()[0].count == 1
