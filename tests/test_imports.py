def test_import_fitrpg_package() -> None:
    import importlib

    module = importlib.import_module("fitrpg")
    assert module is not None


def test_import_services_no_side_effects() -> None:
    from fitrpg.data.repositories import ClassesRepository
    from fitrpg.services import CharacterStatsService

    service = CharacterStatsService(classes_repo=ClassesRepository())
    assert service is not None
