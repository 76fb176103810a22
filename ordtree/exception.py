
class OrdTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class ParseError(OrdTreeError):
    pass

class InvalidSizeError(ParseError):
    def __str__(self):
        return "invalid tree size: " + ''.join(map(str, self.args))

class InputParseError(ParseError):
    def __init__(self, source, line, msg):
        super(InputParseError, self).__init__(source, line, msg)
        self.source = source
        self.line = line
        self.msg = msg
    def __str__(self):
        return self.source + ':' + str(self.line) + ": " + str(self.msg)
