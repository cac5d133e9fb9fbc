# -*- coding: utf-8 -*-
from .pipeline import Normalizer
