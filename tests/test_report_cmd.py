"""Integration tests for report/lookup/info CLI commands using CliRunner.

Ensembl and Protein Atlas responses are served by a fake RestClient.get
routed on URL, so no network access is needed.
"""

from unittest.mock import Mock, patch

import pytest
import requests
from click.testing import CliRunner

from orthoatlas.api_clients.base import RestClient
from orthoatlas.cli.main import cli
from orthoatlas.output import TABULAR_HEADER


HOMOLOGY_URL = "https://rest.ensembl.org/homology/symbol/Sus_scrofa/"
HPA_URL = "https://www.proteinatlas.org/"

HOMOLOGY_RESPONSES = {
    "TP53": {"data": [{"homologies": [{"target": {"id": "ENSG00000141510"}}]}]},
    "BRCA1": {"data": []},
    "MYO7A": {"data": [{"homologies": [{"target": {"id": "ENSG00000137474"}}]}]},
}

P53_XML = """<?xml version="1.0" encoding="UTF-8"?>
<proteinAtlas>
  <entry>
    <name>P53_HUMAN</name>
    <rnaExpression assayType="consensusTissue">
      <rnaSpecificity specificity="Tissue enhanced">
        <tissue>liver</tissue>
        <tissue>spleen</tissue>
      </rnaSpecificity>
    </rnaExpression>
  </entry>
</proteinAtlas>
"""

MYO7A_XML = """<?xml version="1.0" encoding="UTF-8"?>
<proteinAtlas>
  <entry>
    <name>MYO7A</name>
    <rnaExpression assayType="humanBrainRegional">
      <rnaSpecificity specificity="Region enriched"/>
    </rnaExpression>
    <cellTypeExpression>
      <cellTypeSpecificity>
        <cellType>Rod photoreceptor cells</cellType>
        <cellType>Cone photoreceptor cells</cellType>
      </cellTypeSpecificity>
      <cellTypeExpressionCluster>Retina - Visual perception</cellTypeExpressionCluster>
    </cellTypeExpression>
  </entry>
</proteinAtlas>
"""

HPA_DOCUMENTS = {
    "ENSG00000141510": P53_XML,
    "ENSG00000137474": MYO7A_XML,
}


def _response(status_code=200, json_data=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = text
    return response


def fake_get(self, url, params=None, **kwargs):
    """Route homology and HPA requests to canned responses."""
    if url.startswith(HOMOLOGY_URL):
        symbol = url[len(HOMOLOGY_URL):]
        if symbol not in HOMOLOGY_RESPONSES:
            raise requests.HTTPError(f"400 Client Error: no gene {symbol}")
        return _response(json_data=HOMOLOGY_RESPONSES[symbol])
    if url.startswith(HPA_URL) and url.endswith(".xml"):
        gene_id = url[len(HPA_URL):-len(".xml")]
        if gene_id not in HPA_DOCUMENTS:
            raise requests.HTTPError(f"404 Client Error: {gene_id}")
        return _response(text=HPA_DOCUMENTS[gene_id])
    raise AssertionError(f"Unexpected URL: {url}")


@pytest.fixture
def fake_api():
    with patch.object(RestClient, "get", autospec=True, side_effect=fake_get) as mock_get:
        yield mock_get


@pytest.fixture
def runner():
    return CliRunner()


def write_genes(tmp_path, content):
    genes = tmp_path / "genes.txt"
    genes.write_text(content)
    return genes


def test_report_help(runner):
    result = runner.invoke(cli, ["report", "--help"])

    assert result.exit_code == 0
    assert "--file" in result.output
    assert "--format" in result.output
    assert "--on-error" in result.output


def test_report_verbose_end_to_end(runner, fake_api, tmp_path):
    """TP53 resolves to one orthologue; BRCA1 to none; the blank line is skipped."""
    genes = write_genes(tmp_path, "TP53\n\nBRCA1\n")

    result = runner.invoke(cli, ["report", "--file", str(genes)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    start = lines.index("P53_HUMAN")
    assert lines[start + 1] == "\tTissue specificity: liver, spleen"
    assert lines.count("\tTissue specificity: liver, spleen") == 1
    assert "BRCA1" not in result.output

    # One homology request per non-blank symbol plus one HPA request
    requested = [c.args[1] for c in fake_api.call_args_list]
    assert requested == [
        HOMOLOGY_URL + "TP53",
        HPA_URL + "ENSG00000141510.xml",
        HOMOLOGY_URL + "BRCA1",
    ]


def test_report_tabular_rows_in_input_order(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "MYO7A\nBRCA1\nTP53\n")

    result = runner.invoke(cli, ["report", "--file", str(genes), "--format", "tabular"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    header_index = lines.index(TABULAR_HEADER)
    rows = lines[header_index + 1:]
    assert rows == [
        "MYO7A\tMYO7A\t\tRod photoreceptor cells,Cone photoreceptor cells\t"
        "Retina - Visual perception\t\tRegion enriched",
        "TP53\tP53_HUMAN\tliver, spleen\t\t\t\t",
    ]


def test_report_tabular_no_orthologue_for_second_symbol(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "TP53\nBRCA1\n")

    result = runner.invoke(cli, ["report", "--file", str(genes), "--format", "tabular"])

    assert result.exit_code == 0
    data_rows = [line for line in result.output.splitlines() if line.count("\t") == 6]
    assert data_rows[0] == TABULAR_HEADER
    assert len(data_rows) == 2
    assert data_rows[1].startswith("TP53\t")


def test_report_aborts_on_first_failure(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "TP53\nNOTAGENE\nMYO7A\n")

    result = runner.invoke(cli, ["report", "--file", str(genes)])

    assert result.exit_code == 1
    assert "P53_HUMAN" in result.output
    assert "NOTAGENE" in result.output
    # Nothing after the failing symbol is looked up
    requested = [c.args[1] for c in fake_api.call_args_list]
    assert HOMOLOGY_URL + "MYO7A" not in requested


def test_report_skip_policy_continues(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "TP53\nNOTAGENE\nMYO7A\n")

    result = runner.invoke(
        cli,
        ["report", "--file", str(genes), "--format", "tabular", "--on-error", "skip"],
    )

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert any(line.startswith("TP53\tP53_HUMAN") for line in lines)
    assert any(line.startswith("MYO7A\tMYO7A") for line in lines)
    assert "1 lookup(s) failed and were skipped" in result.output


def test_report_error_policy_from_config(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "NOTAGENE\nTP53\n")
    config_file = tmp_path / "config.yaml"
    config_file.write_text("report:\n  error_policy: skip\n  output_mode: tabular\n")

    result = runner.invoke(
        cli, ["--config", str(config_file), "report", "--file", str(genes)]
    )

    assert result.exit_code == 0, result.output
    assert TABULAR_HEADER in result.output.splitlines()
    assert any(line.startswith("TP53\t") for line in result.output.splitlines())


def test_report_missing_input_file(runner, tmp_path):
    result = runner.invoke(cli, ["report", "--file", str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_report_default_file_is_genes_txt(runner, fake_api, tmp_path):
    with runner.isolated_filesystem(temp_dir=tmp_path):
        with open("genes.txt", "w") as f:
            f.write("TP53\n")

        result = runner.invoke(cli, ["report"])

    assert result.exit_code == 0, result.output
    assert "P53_HUMAN" in result.output.splitlines()


def test_lookup_human_symbols(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "TP53\nNOTAGENE\n")

    with patch.object(RestClient, "post_json", autospec=True) as mock_post:
        mock_post.return_value = {"TP53": {"id": "ENSG00000141510", "display_name": "TP53"}}

        result = runner.invoke(cli, ["lookup", "--file", str(genes), "--format", "tabular"])

    assert result.exit_code == 0, result.output
    url, payload = mock_post.call_args.args[1:]
    assert url == "https://rest.ensembl.org/lookup/symbol/homo_sapiens"
    assert payload == {"symbols": ["TP53", "NOTAGENE"]}
    assert "TP53\tP53_HUMAN\tliver, spleen\t\t\t\t" in result.output.splitlines()
    assert not any(line.startswith("NOTAGENE\t") for line in result.output.splitlines())


def test_lookup_record_without_id_is_fatal(runner, fake_api, tmp_path):
    genes = write_genes(tmp_path, "TP53\n")

    with patch.object(RestClient, "post_json", autospec=True) as mock_post:
        mock_post.return_value = {"TP53": {"display_name": "TP53"}}

        result = runner.invoke(cli, ["lookup", "--file", str(genes)])

    assert result.exit_code == 1
    assert "P53_HUMAN" not in result.output


def test_info_shows_defaults(runner):
    result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "Sus_scrofa" in result.output
    assert "taxon 9606" in result.output
    assert "Config Hash:" in result.output


def test_info_with_invalid_config(runner, tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("api:\n  timeout_seconds: 0\n")

    result = runner.invoke(cli, ["--config", str(config_file), "info"])

    assert result.exit_code == 1
    assert "Error loading config" in result.output
