class Reporter:
    _metrics = {}

    @classmethod
    def report(cls, metricname, metricdescription=None, value=None):
        if isinstance(metricname, list):
            return [cls._metrics.get(name) for name in metricname]
        if value is not None:
            cls._metrics[metricname] = value
            return value
        return cls._metrics.get(metricname)


class Application:
    def run(self):
        from lzb.codec import LZB
        codec = LZB(reporter=Reporter)
        text = 'The quick brown fox jumps over the lazy dog. ' * 8 + '\u1000\u2603'
        data = codec.compress(text)
        restored = codec.decompress(data)
        print('Compressed %d symbols into %d bytes' % (len(text), len(data)))
        print('Roundtrip ok:', restored == text)
        print('Metrics:', Reporter.report(['encode_calls', 'decode_calls', 'compression_ratio', 'code_width']))


if __name__ == '__main__':
    Application().run()
