"""
Tests for the manage_services command line tool.
"""
import json

import pytest

import manage_services


@pytest.fixture
def services_file(tmp_path):
    path = tmp_path / 'services.json'
    path.write_text(json.dumps([
        {'service_id': 'https://one.example.com', 'name': 'One'},
        {'id': 5, 'service_id': 'https://two.example.com', 'name': 'Two'},
    ]))
    return str(path)


class TestManageServices:

    def test_import_then_count(self, store, services_file, capsys):
        assert manage_services.main(['import', services_file], store=store) == 0
        assert store.size() == 2

        assert manage_services.main(['count'], store=store) == 0
        assert capsys.readouterr().out.strip().endswith('2')

    def test_import_single_record(self, store, tmp_path):
        path = tmp_path / 'one.json'
        path.write_text(json.dumps({'service_id': 'https://solo', 'name': 'Solo'}))

        assert manage_services.main(['import', str(path)], store=store) == 0
        assert store.find_service_by_service_id('https://solo').name == 'Solo'

    def test_import_invalid_file(self, store, tmp_path):
        path = tmp_path / 'bad.json'
        path.write_text(json.dumps([{'name': 'No service id'}]))

        assert manage_services.main(['import', str(path)], store=store) == 1
        assert store.size() == 0

    def test_find_by_pattern(self, store, services_file, capsys):
        manage_services.main(['import', services_file], store=store)
        capsys.readouterr()

        assert manage_services.main(['find', '--pattern', 'TWO'], store=store) == 0
        assert 'https://two.example.com' in capsys.readouterr().out

    def test_find_missing(self, store):
        assert manage_services.main(['find', '--id', '404'], store=store) == 1

    def test_delete(self, store, services_file):
        manage_services.main(['import', services_file], store=store)

        assert manage_services.main(['delete', '--id', '5'], store=store) == 0
        assert manage_services.main(['delete', '--id', '5'], store=store) == 1
        assert store.size() == 1

    def test_list_empty(self, store, capsys):
        assert manage_services.main(['list'], store=store) == 0
        assert 'No registered services' in capsys.readouterr().out

    def test_drop_flag_clears_collection(self, store, services_file):
        manage_services.main(['import', services_file], store=store)

        assert manage_services.main(['--drop', 'count'], store=store) == 0
        assert store.size() == 0
