import json
import pytest
from pydantic import ValidationError
from variantgen.config import Settings
from variantgen.engine import generate_variants
from variantgen.models import Selection
from variantgen.store import (
    apply_result,
    build_request,
    init_workspace,
    load_workspace,
    save_workspace,
    with_selection,
)


def test_init_writes_sample_catalog(tmp_path):
    path = tmp_path / "ws.json"
    init_workspace(path)
    ws = load_workspace(path)
    assert [p.sku for p in ws.products] == ["TSHIRT-001", "BAG-001", "SANDAL-001"]
    assert [a.name for a in ws.attributes] == ["Size", "Material"]
    assert ws.variants == []
    raw = json.loads(path.read_text(encoding="utf-8"))
    # wire names of the admin API are kept on disk
    assert "status" in raw["colors"][0]


def test_init_refuses_to_overwrite(tmp_path):
    path = tmp_path / "ws.json"
    init_workspace(path)
    with pytest.raises(FileExistsError):
        init_workspace(path)
    init_workspace(path, overwrite=True)


def test_invalid_workspace_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"products": [{"id": "abc", "name": "x", "sku": "y"}]}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_workspace(path)


def test_generate_and_persist_round(tmp_path):
    path = tmp_path / "ws.json"
    ws = init_workspace(path)
    ws = with_selection(ws, 9001, Selection(attributes={101: ["S", "M"]}, color_ids=[1, 2], brand_id=2))
    settings = Settings(workspace_path=path, price_default=25, stock_default=5)

    request = build_request(ws, 9001, settings)
    assert request.base_sku == "TSHIRT-001"
    assert request.selected_brand_name == "Nike"

    result = generate_variants(request)
    ws = apply_result(ws, result)
    save_workspace(ws, path)

    reloaded = load_workspace(path)
    assert [v.sku for v in reloaded.variants] == [
        "TSHIRT-001-RED-S",
        "TSHIRT-001-RED-M",
        "TSHIRT-001-BLACK-S",
        "TSHIRT-001-BLACK-M",
    ]
    assert reloaded.variants[0].price == 25
    assert reloaded.variants[0].stock == 5
    assert reloaded.selection_for(9001).attributes == {101: ["S", "M"]}

    again = generate_variants(build_request(reloaded, 9001, settings))
    assert again.ok and again.new_rows == []
    assert apply_result(reloaded, again) is reloaded


def test_build_request_unknown_product(tmp_path):
    ws = init_workspace(tmp_path / "ws.json")
    with pytest.raises(ValueError):
        build_request(ws, 1, Settings())
    with pytest.raises(ValueError):
        with_selection(ws, 1, Selection())


def test_apply_result_ignores_refused_generation(tmp_path):
    ws = init_workspace(tmp_path / "ws.json")
    result = generate_variants(build_request(ws, 9001, Settings()))
    assert not result.ok
    assert result.missing_required == ["Size"]
    assert apply_result(ws, result) is ws
