from app.core.schema_service import SchemaService
from app.core.schema_store import SqlSchemaStore
from app.db.session import SessionLocal


def main():
    store = SqlSchemaStore(SessionLocal)
    if store.count():
        print("Schemas already present:", store.count())
        return
    created = SchemaService(store).initialize_default_schemas()
    print("Schemas seeded:", [s.schema_name for s in created])

if __name__ == "__main__":
    main()
