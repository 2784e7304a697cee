import pytest

from meta_parser.pipeline.errors import GenerationError
from meta_parser.pipeline.output import AtomicWriter


class TestAtomicWriter:
    def test_write_creates_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "out.h"
        AtomicWriter().write(target, "namespace X {\n}\n")
        assert target.read_text() == "namespace X {\n}\n"

    def test_no_temporary_files_left(self, tmp_path):
        target = tmp_path / "out.h"
        writer = AtomicWriter()
        writer.write(target, "first\n")
        writer.write(target, "second\n")
        assert target.read_text() == "second\n"
        assert [p.name for p in tmp_path.iterdir()] == ["out.h"]

    def test_non_atomic_write(self, tmp_path):
        target = tmp_path / "out.h"
        AtomicWriter(atomic=False).write(target, "int x;\n")
        assert target.read_text() == "int x;\n"

    def test_unbalanced_braces(self, tmp_path):
        target = tmp_path / "out.h"
        with pytest.raises(GenerationError, match="braces"):
            AtomicWriter().write(target, "class A {\n")
        assert not target.exists()

    def test_unbalanced_conditionals(self, tmp_path):
        with pytest.raises(GenerationError, match="preprocessor"):
            AtomicWriter().write(tmp_path / "out.h", "#ifndef A\n#define A\n")

    def test_balanced_conditionals(self, tmp_path):
        content = "#ifndef A\n#define A\n#if B\n#endif\n#endif // A\n"
        AtomicWriter().write(tmp_path / "out.h", content)

    def test_validation_can_be_skipped(self, tmp_path):
        target = tmp_path / "out.h"
        AtomicWriter().write(target, "{", validate=False)
        assert target.read_text() == "{"

    def test_custom_validator(self, tmp_path):
        def reject(content):
            raise GenerationError("rejected")

        with pytest.raises(GenerationError, match="rejected"):
            AtomicWriter(validate_cpp=reject).write(tmp_path / "out.h", "")


if __name__ == "__main__":
    pytest.main([__file__])
