"""Tests for the naming module."""

import pytest

from encar.naming import operation_id_to_method_name


class TestOperationIdToMethodName:
    """Test method name derivation from schema operation ids."""

    def test_list_vehicles(self):
        assert operation_id_to_method_name("encar_v2_vehicles_list") == "listVehicles"

    def test_retrieve_becomes_get(self):
        assert operation_id_to_method_name("encar_v2_vehicles_retrieve") == "getVehicles"

    def test_multi_token_resource(self):
        assert (
            operation_id_to_method_name("encar_v2_business_diagnosis_centers_list")
            == "listBusinessDiagnosisCenters"
        )

    def test_api_token_is_dropped(self):
        assert operation_id_to_method_name("api_v2_vehicles_list") == "listVehicles"

    def test_stats_with_resource(self):
        assert (
            operation_id_to_method_name("encar_v2_catalog_manufacturers_stats")
            == "getCatalogManufacturersStats"
        )

    def test_enums_with_resource(self):
        assert operation_id_to_method_name("encar_v2_vehicles_enums") == "getVehiclesEnums"

    def test_stats_without_resource(self):
        assert operation_id_to_method_name("encar_v2_stats") == "getStats"

    def test_enums_without_resource(self):
        assert operation_id_to_method_name("encar_v2_enums") == "getEnums"

    def test_bare_list_keeps_identifier(self):
        assert operation_id_to_method_name("encar_v2_list") == "encar_v2_list"

    def test_bare_retrieve_passes_through(self):
        assert operation_id_to_method_name("encar_v2_retrieve") == "retrieve"

    def test_only_stop_tokens_falls_back(self):
        assert operation_id_to_method_name("api_encar_v2") == "api_encar_v2"

    def test_other_actions_pass_through(self):
        assert operation_id_to_method_name("encar_v2_dealers_update") == "updateDealers"

    def test_capitalizes_only_first_letter(self):
        assert operation_id_to_method_name("encar_v2_modelGroups_list") == "listModelGroups"

    @pytest.mark.parametrize(
        "operation_id",
        [
            "encar_v2_vehicles_list",
            "encar_v2_catalog_models_retrieve",
            "encar_v2_enums",
            "encar_v2_list",
        ],
    )
    def test_deterministic(self, operation_id):
        assert operation_id_to_method_name(operation_id) == operation_id_to_method_name(operation_id)

    @pytest.mark.parametrize(
        "operation_id",
        ["encar_v2_vehicles_retrieve", "encar_v2_catalog_models_retrieve", "foo_retrieve"],
    )
    def test_retrieve_with_resource_starts_with_get(self, operation_id):
        assert operation_id_to_method_name(operation_id).startswith("get")

    @pytest.mark.parametrize("action", ["stats", "enums"])
    def test_noun_actions_end_with_action(self, action):
        name = operation_id_to_method_name(f"encar_v2_catalog_{action}")
        assert name.startswith("get")
        assert name.endswith(action.capitalize())
