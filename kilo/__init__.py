"""
kilo: raw terminal input core of a small text editor

```bash
$ kilo
97 ('a')
3
113 ('q')
```
"""
__version__ = "0.1.0"
