"""
Tests for the RegisteredService model.
"""
import pytest
from pydantic import ValidationError

from services.registered_service import INITIAL_IDENTIFIER_VALUE, RegisteredService


class TestContentHash:

    def test_is_deterministic(self, make_service):
        assert make_service().content_hash() == make_service().content_hash()

    def test_ignores_id(self, make_service):
        assert make_service(id=1).content_hash() == make_service(id=2).content_hash()

    def test_depends_on_content(self, make_service):
        assert make_service(name='A').content_hash() != make_service(name='B').content_hash()

    def test_fits_signed_64_bit_and_is_not_sentinel(self, make_service):
        value = make_service(properties={'tier': 'gold'}).content_hash()

        assert 0 <= value < INITIAL_IDENTIFIER_VALUE


class TestDocumentMapping:

    def test_id_stored_as_document_identity(self, make_service):
        document = make_service(id=7).to_document()

        assert document['_id'] == 7
        assert 'id' not in document
        assert document['service_id'] == 'https://app.example.com/.*'

    def test_from_document_restores_record(self, make_service):
        service = make_service(id=7, required_handlers=['ldap'], properties={'a': 1})

        assert RegisteredService.from_document(service.to_document()) == service


class TestValidation:

    def test_defaults_to_sentinel_id(self, make_service):
        service = make_service()

        assert service.id == INITIAL_IDENTIFIER_VALUE
        assert not service.has_assigned_id()

    def test_blank_service_id_rejected(self):
        with pytest.raises(ValidationError):
            RegisteredService(service_id='   ', name='Blank')

    def test_name_required(self):
        with pytest.raises(ValidationError):
            RegisteredService(service_id='https://app.example.com')
