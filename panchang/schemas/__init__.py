from .panchang_viewmodel import PanchangReport, TimeWindowVM
