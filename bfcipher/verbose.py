import time, sys

def setup(v=1, stream=None):
    stream = stream or sys.stdout
    def verbose(s):
        if v >= 2:
            stream.write('\x1b[32m'+time.strftime('%Y-%m-%d %H:%M:%S')+'\x1b[m ')
            stream.write(s+'\x1b[0K\n')
        else:
            stream.write(s+'\n')
        stream.flush()
    return verbose
