"""
Tests for splitting INP files into named blocks
"""

import pytest

from infrastructure.inp.segmenter import LineSegmenter, segment_lines
from services.error_types import StructuralParseError
from services.inp_parser import parse_inp_file

DELIMITER = "$ ---------------------------------------------------------"


class TestLineSegmenter:
    """Test block boundaries, names and structural errors"""

    def test_sample_file_block_names(self, sample_inp_lines):
        """Test every header in the sample file becomes a block, in order"""
        blocks = parse_inp_file(sample_inp_lines)

        assert [block.name for block in blocks] == [
            "INPUT",
            "Abort, Diagnostics",
            "Site and Building Data",
            "Materials / Layers / Constructions",
            "Glass Types",
            "Polygons",
            "Misc Cost Related Objects",
            "Utility Rates",
            "Boilers",
            "Chillers",
            "HVAC Systems / Zones",
            "THE END",
        ]

    def test_sample_file_records(self, sample_inp_lines):
        """Test records are attached to the block they appear in"""
        blocks = {block.name: block for block in parse_inp_file(sample_inp_lines)}

        assert len(blocks["INPUT"]) == 0
        assert [r.name for r in blocks["Glass Types"]] == ["Proposed Glass", "Baseline Glass"]
        assert blocks["Glass Types"].records[1].start_line == 51
        assert [r.name for r in blocks["THE END"]] == ["END", "COMPUTE", "STOP"]
        assert blocks["HVAC Systems / Zones"].records[0].start_line == 150

    def test_expressions_normalized_before_assembly(self, sample_inp_lines):
        """Test bracket expressions arrive as decimals in record values"""
        blocks = {block.name: block for block in parse_inp_file(sample_inp_lines)}
        roof = blocks["Materials / Layers / Constructions"].records[1]
        assert roof.text("U-VALUE") == "0.125"

    def test_root_block_only_on_first_line(self, make_inp):
        """Test INPUT .. later in the file is not a root marker"""
        lines = make_inp({"Title": ["INPUT ..", 'TITLE = "X" ..']}, root=False)
        blocks = segment_lines(lines)
        assert [block.name for block in blocks] == ["Title"]
        assert [r.name for r in blocks[0]] == ["INPUT", "TITLE"]

    def test_repeated_block_names_kept_separate(self, make_inp):
        """Test two headers with the same name give two blocks"""
        lines = make_inp({"Polygons": ['"P1" = POLYGON', "   .."]})
        lines += ["", DELIMITER, "$              Polygons", DELIMITER, '"P2" = POLYGON', "   .."]

        blocks = segment_lines(lines)
        polygons = [block for block in blocks if block.name == "Polygons"]
        assert len(polygons) == 2
        assert polygons[0].records[0].name == "P1"
        assert polygons[1].records[0].name == "P2"

    def test_lines_before_first_header_ignored(self):
        """Test preamble text outside any block"""
        lines = ["INPUT ..", "TITLE = \"stray\" ..", DELIMITER, "$ Glass Types", DELIMITER,
                 '"G" = GLASS-TYPE', "   .."]
        blocks = segment_lines(lines)
        assert [block.name for block in blocks] == ["INPUT", "Glass Types"]

    def test_body_flushed_at_end_of_file(self):
        """Test the last block needs no trailing header"""
        blocks = segment_lines([DELIMITER, "$ Chillers", DELIMITER, '"C1" = CHILLER', "   .."])
        assert blocks[-1].name == "Chillers"
        assert len(blocks[-1]) == 1

    def test_missing_closing_delimiter_tolerated(self):
        """Test a header whose second delimiter is absent"""
        blocks = segment_lines([DELIMITER, "$ Chillers", '"C1" = CHILLER', "   .."])
        assert [r.name for r in blocks[0]] == ["C1"]

    def test_blank_lines_keep_line_numbers(self):
        """Test record start lines count skipped blank lines"""
        blocks = segment_lines([DELIMITER, "$ Boilers", DELIMITER, "", "", '"B1" = BOILER', "   .."])
        assert blocks[0].start_line == 2
        assert blocks[0].records[0].start_line == 6

    def test_delimiter_at_end_of_file_raises(self):
        """Test a delimiter with nothing after it"""
        lines = [DELIMITER, "$ Boilers", DELIMITER, '"B1" = BOILER', "   ..", DELIMITER]
        with pytest.raises(StructuralParseError) as exc_info:
            segment_lines(lines)
        assert exc_info.value.line_number == 6

    def test_delimiter_followed_by_delimiter_raises(self):
        """Test a header with no name line"""
        with pytest.raises(StructuralParseError) as exc_info:
            segment_lines([DELIMITER, DELIMITER, "$ Boilers"])
        assert exc_info.value.line_number == 1

    def test_empty_header_name_raises(self):
        """Test a name line that is only a comment marker"""
        with pytest.raises(StructuralParseError) as exc_info:
            segment_lines([DELIMITER, "$   ", DELIMITER])
        assert exc_info.value.line_number == 2

    def test_unbalanced_quotes_raise(self):
        """Test an odd number of quotes in a body line"""
        lines = [DELIMITER, "$ Glass Types", DELIMITER, '"Baseline Glass = GLASS-TYPE', "   .."]
        with pytest.raises(StructuralParseError) as exc_info:
            segment_lines(lines)
        assert exc_info.value.line_number == 4
        assert exc_info.value.block_name == "Glass Types"

    def test_unbalanced_quotes_in_comment_allowed(self):
        """Test comment lines are not quote-checked"""
        lines = [DELIMITER, "$ Glass Types", DELIMITER, '$ the "odd one', '"G" = GLASS-TYPE', "   .."]
        assert len(segment_lines(lines)[0]) == 1

    def test_unterminated_record_raises(self):
        """Test the assembler error surfaces through segmentation"""
        with pytest.raises(StructuralParseError):
            segment_lines([DELIMITER, "$ Boilers", DELIMITER, '"B1" = BOILER', "   TYPE = HW-BOILER"])

    def test_segmenter_reusable(self, sample_inp_lines):
        """Test one segmenter instance gives identical results on repeat runs"""
        segmenter = LineSegmenter()
        first = segmenter.segment(sample_inp_lines)
        second = segmenter.segment(sample_inp_lines)
        assert [(b.name, len(b)) for b in first] == [(b.name, len(b)) for b in second]
