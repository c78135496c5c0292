__version__ = '0.3.0'
__commit__ = 'HEAD'

suite = 'cxxrun'
