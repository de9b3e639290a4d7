from conjunto.storage import LocalStorage, MemoryStorage


def test_memory_storage_roundtrip():
    storage = MemoryStorage()
    storage.set_item("token", "abc")

    assert storage.get_item("token") == "abc"
    storage.remove_item("token")
    assert storage.get_item("token") is None
    # Quitar una clave que no existe no falla
    storage.remove_item("user")


def test_local_storage_persists_between_instances(tmp_path):
    path = tmp_path / "sesion" / "storage.json"
    LocalStorage(str(path)).set_item("user", {"id": 1, "name": "Ana"})

    reopened = LocalStorage(str(path))

    assert reopened.get_item("user") == {"id": 1, "name": "Ana"}


def test_local_storage_remove_and_clear(tmp_path):
    path = str(tmp_path / "storage.json")
    storage = LocalStorage(path)
    storage.set_item("token", "abc")
    storage.set_item("user", {"id": 1})

    storage.remove_item("token")
    assert LocalStorage(path).get_item("token") is None
    assert LocalStorage(path).get_item("user") == {"id": 1}

    storage.clear()
    assert LocalStorage(path).get_item("user") is None


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{no es json", encoding="utf-8")

    assert LocalStorage(str(path)).get_item("token") is None
