"""Hilbert space-filling curve on 2^n * 2^n structured grids: cell <-> distance conversion and grid orderings"""
from hilbert_sfc.simple_hilbert import *
from hilbert_sfc.structured import *
from hilbert_sfc.utils import *
