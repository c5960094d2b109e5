"""Application pagination – page request, sort and page primitives."""
from staff_admin.application.pagination.page_request import DEFAULT_PAGE_SIZE, PageRequest, Sort, SortDirection
from staff_admin.application.pagination.page import Page

__all__ = ["DEFAULT_PAGE_SIZE", "Page", "PageRequest", "Sort", "SortDirection"]
