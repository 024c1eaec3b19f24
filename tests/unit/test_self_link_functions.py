"""
Tests for the self link functions exposed to the host runtime.
"""

import pytest

from selflink_functions.functions import (
    SelfLinkFunction,
    location_from_self_link,
    project_from_self_link,
    region_from_self_link,
    resource_name_from_self_link,
    zone_from_self_link,
)


class TestResourceNameFromSelfLink:
    """Tests for resource_name_from_self_link."""
    
    def test_definition(self):
        definition = resource_name_from_self_link().definition()
        
        assert definition.name == "resource_name_from_self_link"
        assert definition.return_type == "string"
        assert [p.name for p in definition.parameters] == ["self_link"]
        assert "my-instance" in definition.description
    
    def test_valid_self_link(self, valid_self_link, resource_name):
        response = resource_name_from_self_link().run([valid_self_link])
        
        assert response.ok
        assert response.result == resource_name
    
    def test_valid_id(self, valid_id, resource_name):
        response = resource_name_from_self_link().run([valid_id])
        
        assert response.result == resource_name
    
    def test_repetitive_input(self, repetitive_input, resource_name):
        response = resource_name_from_self_link().run([repetitive_input])
        
        assert response.result == resource_name
        assert response.diagnostics.items == []
    
    def test_invalid_input_has_no_result(self, resource_name):
        response = resource_name_from_self_link().run([resource_name])
        
        assert not response.ok
        assert response.result is None
        assert response.diagnostics.errors[0].argument_index == 0


class TestArgumentLoading:
    """Tests for argument validation before extraction."""
    
    @pytest.mark.parametrize("arguments", [[], ["a/b", "c/d"]])
    def test_wrong_argument_count(self, arguments):
        response = resource_name_from_self_link().run(arguments)
        
        assert not response.ok
        assert response.result is None
        assert response.diagnostics.errors[0].summary == "Invalid number of arguments"
    
    def test_non_string_argument(self):
        response = resource_name_from_self_link().run([42])
        
        assert not response.ok
        error = response.diagnostics.errors[0]
        assert error.summary == "Invalid argument type"
        assert error.argument_index == 0
        assert "int" in error.detail


class TestSiblingFunctions:
    """Tests for project/region/zone/location functions."""
    
    def test_project(self, valid_self_link):
        assert project_from_self_link().run([valid_self_link]).result == "my-project"
    
    def test_zone(self, valid_id):
        assert zone_from_self_link().run([valid_id]).result == "us-central1-c"
    
    def test_region(self):
        subnet = "projects/my-project/regions/us-central1/subnetworks/my-subnet"
        
        assert region_from_self_link().run([subnet]).result == "us-central1"
    
    def test_location(self):
        function_id = "projects/my-project/locations/europe-west1/functions/my-function"
        
        assert location_from_self_link().run([function_id]).result == "europe-west1"
    
    def test_missing_region_is_error(self, valid_self_link):
        response = region_from_self_link().run([valid_self_link])
        
        assert not response.ok
        assert response.diagnostics.errors[0].summary == "No region is present in the input string"
    
    def test_ambiguous_project_warns(self):
        text = "projects/my-project/global/networks/projects/other-project/"
        
        response = project_from_self_link(strict=False).run([text])
        
        assert response.ok
        assert response.result == "my-project"
        assert len(response.diagnostics.warnings) == 1
    
    def test_ambiguous_project_strict_is_error(self):
        text = "projects/my-project/global/networks/projects/other-project/"
        
        response = project_from_self_link(strict=True).run([text])
        
        assert not response.ok
        assert response.result is None
    
    def test_strict_defaults_to_settings(self, monkeypatch):
        from selflink_functions.config import settings
        
        monkeypatch.setattr(settings, "strict_matching", True)
        
        assert isinstance(zone_from_self_link(), SelfLinkFunction)
        assert zone_from_self_link().strict is True
        assert zone_from_self_link(strict=False).strict is False
