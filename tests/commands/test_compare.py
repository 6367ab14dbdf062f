"""Tests for compare CLI command."""

from methodmatch.commands.compare import compare


def invoke(runner, reference_file, candidate_file, target, *args):
    return runner.invoke(
        compare,
        [
            "-r",
            str(reference_file),
            "-m",
            "Calc::Compute",
            "-c",
            str(candidate_file),
            "-t",
            target,
            *args,
        ],
    )


class TestCompare:
    """Tests for 'compare' command."""

    def test_exact_match(self, runner, reference_file, candidate_file):
        """Test an identical method matches exactly."""
        result = invoke(runner, reference_file, candidate_file, "a::b")

        assert result.exit_code == 0
        assert "Match:" in result.output
        assert "No match" not in result.output

    def test_exact_no_match(self, runner, reference_file, candidate_file):
        """Test the noisy copy is not an exact match."""
        result = invoke(runner, reference_file, candidate_file, "f::g")

        assert result.exit_code == 0
        assert "No match:" in result.output

    def test_fuzzy_reports_coverage(self, runner, reference_file, candidate_file):
        """Test fuzzy mode prints the coverage ratio."""
        result = invoke(runner, reference_file, candidate_file, "f::g", "--fuzzy")

        assert result.exit_code == 0
        assert "Coverage: 1.000" in result.output
        assert "Match:" in result.output

    def test_fuzzy_unrelated(self, runner, reference_file, candidate_file):
        """Test an unrelated method has zero coverage."""
        result = invoke(runner, reference_file, candidate_file, "a::c", "--fuzzy")

        assert result.exit_code == 0
        assert "Coverage: 0.000" in result.output
        assert "No match:" in result.output

    def test_nested_target(self, runner, reference_file, candidate_file):
        """Test methods of nested types are addressed with '/'."""
        result = invoke(runner, reference_file, candidate_file, "a/d::e")

        assert result.exit_code == 0
        assert "Match:" in result.output

    def test_unknown_target(self, runner, reference_file, candidate_file):
        """Test an unknown candidate method aborts."""
        result = invoke(runner, reference_file, candidate_file, "a::zzz")

        assert result.exit_code != 0
        assert "Method not found" in result.output

    def test_fuzzy_candidate_without_body(self, runner, reference_file, candidate_file):
        """Test an abstract candidate has zero coverage and no match."""
        result = invoke(
            runner, reference_file, candidate_file, "f::h", "--fuzzy", "--threshold", "0.0"
        )

        assert result.exit_code == 0
        assert "Coverage: 0.000" in result.output
        assert "No match:" in result.output

    def test_fuzzy_reference_without_body(self, runner, reference_file, candidate_file):
        """Test a bodiless reference is rejected in fuzzy mode."""
        result = runner.invoke(
            compare,
            [
                "-r",
                str(reference_file),
                "-m",
                "Calc::Abstract",
                "-c",
                str(candidate_file),
                "-t",
                "a::b",
                "--fuzzy",
            ],
        )

        assert result.exit_code != 0
        assert "Error" in result.output
