import sys

class Reporter():
    """
    report errors, grouped by pipeline stage
    """
    def __init__(self):
        self.errors  = []
        self.section = None

    def crash(self, errstr):
        print("=== Error backlog ===", file=sys.stderr)

        for err in self.errors:
            print(f"[ Error ] {err}", file=sys.stderr)

        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=sys.stderr)

        sys.exit(1)

    def log(self, error):
        match error:
            case Error():
                if error.stage is None:
                    error.stage = self.section
                self.errors.append(error)
            case _:
                self.errors.append(Error(str(error), stage = self.section))

    def checkpoint(self, section = None):
        """
        fail fast: surface the first error logged by the finished stage
        """
        if self.errors:
            first, self.errors = self.errors[0], []
            raise first

        self.section = section

    def fail(self, cls, errstr, this = None, position = None):
        raise cls(errstr, this = this, position = position, stage = self.section)

class Error(Exception):
    """
    class allows to pass errors forward with all information
    """
    def __init__(self, errstr, this = None, position = None, stage = None):
        super().__init__(errstr)
        self.errstr     = errstr
        self.this       = this          # offending source text
        self.position   = position      # Range | None
        self.stage      = stage         # str | None

    def __str__(self):
        to_log  = f"{{{self.stage}}} " if self.stage    else ""
        to_log += self.errstr
        to_log += f" in {{{self.this}}}"            if self.this is not None else ""
        to_log += f" at {self.position}"            if self.position         else ""
        return to_log

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

class LexicalError(Error):
    pass

class NumberOverflow(Error):
    pass

class ClassificationError(Error):
    pass
