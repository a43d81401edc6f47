import os
import tempfile

# must run before catalog.config is imported anywhere; one directory per run
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="catalog-tests-"), "catalog_test.db"
)
