import csv
from unittest.mock import patch

import main
from supplier_matching.models import RequestCriteria, SupplierProfile

SUPPLIERS = (
    "id,role,companyName,businessType,productCategories,productTags,serviceTags,industries,score\n"
    "s1,proveedor,Distribuidora Centro,distribuidor,materia_prima;repuestos,tornillos M8,,,90\n"
    "s2,proveedor,Plásticos Lima,fabricante,materia_prima,PVC,,,40\n"
    "s3,proveedor,Servicios Beta,servicio,servicios,,Transporte,,10\n"
    "u1,gestor,Gestor,,,,,,\n"
)
REQUESTS = (
    "id,requiredBusinessType,requiredCategories,requiredTags,customRequiredTags,industry\n"
    "r1,cualquiera,materia_prima,tornillo,,\n"
    "r2,,,,,\n"
    "r3,,,,,textil\n"
)


def run_main(tmp_path, minimum_score=None):
    suppliers_csv = tmp_path / "suppliers.csv"
    suppliers_csv.write_text(SUPPLIERS, encoding="utf-8")
    requests_csv = tmp_path / "requests.csv"
    requests_csv.write_text(REQUESTS, encoding="utf-8")
    output_csv = tmp_path / "out.csv"

    threshold = main.MIN_MATCH_SCORE if minimum_score is None else minimum_score
    with patch("main.REQUESTS_CSV", str(requests_csv)), \
         patch("main.SUPPLIERS_CSV", str(suppliers_csv)), \
         patch("main.OUTPUT_CSV", str(output_csv)), \
         patch("main.MIN_MATCH_SCORE", threshold):
        main.main()

    with open(output_csv, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_process_request_skips_requests_without_criteria():
    """A request with no criteria returns nothing, even though every supplier would score 50."""
    suppliers = [SupplierProfile(id="s1", score=90)]
    assert main.process_request(RequestCriteria(id="r0"), suppliers) == []


def test_process_request_skips_industry_only_requests():
    """Industry alone does not start a supplier search."""
    suppliers = [SupplierProfile(id="s1", industries=["textil"], score=90)]
    assert main.process_request(RequestCriteria(id="r3", industry="textil"), suppliers) == []


def test_main_writes_ranked_matches(tmp_path):
    """
    Run the batch entry point over small CSV exports and check the output file.
    """
    rows = run_main(tmp_path, minimum_score=20)

    assert rows[0] == main.OUTPUT_HEADER
    body = rows[1:]
    # r2 and r3 have no search criteria; s3 scores 25 + 0 + 0 + 5 = 30 and is kept;
    # u1 is not a supplier
    assert [(r[0], r[1]) for r in body] == [("r1", "s1"), ("r1", "s2"), ("r1", "s3")]
    assert body[0][3:6] == ["95.0", "95", "very high"]
    assert body[1][3:6] == ["50.0", "50", "medium"]
    assert body[0][6] == "Business type matched • 1 category(ies) matched • 1 product/service tag(s) matched"
    assert body[0][7:9] == ["Materia Prima", "Distributor / reseller"]
    assert body[2][7:9] == ["", "Service provider"]


def test_main_applies_configured_threshold(tmp_path):
    """The runner's MIN_MATCH_SCORE is passed through to the ranking."""
    rows = run_main(tmp_path, minimum_score=60)
    assert [(r[0], r[1]) for r in rows[1:]] == [("r1", "s1")]
