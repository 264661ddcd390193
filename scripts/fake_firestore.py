"""Minimal in-memory stand-in for the Firestore client used in tests."""
import copy
import uuid


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocRef:
    def __init__(self, store, doc_id):
        self._store = store
        self.id = doc_id

    def set(self, data, merge=False):
        if merge and self.id in self._store:
            self._store[self.id].update(copy.deepcopy(data))
        else:
            self._store[self.id] = copy.deepcopy(data)

    def get(self):
        return FakeSnapshot(self.id, self._store.get(self.id))

    def delete(self):
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, store, filters=None, order=None, limit_to=None):
        self._store = store
        self._filters = filters or []
        self._order = order
        self._limit = limit_to

    def where(self, field, op, value):
        assert op == "=="
        return FakeQuery(self._store, self._filters + [(field, value)], self._order, self._limit)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._store, self._filters, (field, direction), self._limit)

    def limit(self, n):
        return FakeQuery(self._store, self._filters, self._order, n)

    def stream(self):
        rows = [
            (doc_id, data)
            for doc_id, data in self._store.items()
            if all(data.get(f) == v for f, v in self._filters)
        ]
        if self._order:
            field, direction = self._order
            rows.sort(key=lambda r: r[1].get(field), reverse=direction == "DESCENDING")
        if self._limit is not None:
            rows = rows[: self._limit]
        return [FakeSnapshot(doc_id, data) for doc_id, data in rows]


class FakeCollection(FakeQuery):
    def document(self, doc_id=None):
        return FakeDocRef(self._store, doc_id or uuid.uuid4().hex)


class FakeFirestore:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return FakeCollection(self.collections.setdefault(name, {}))
