from agentboost.plugins.base import NpmPackagePlugin


class ReactPlugin(NpmPackagePlugin):
    name = "ReactPlugin"
    package = "react"
    title = "React"
    related = (
        "react-dom",
        "react-router-dom",
        "@reduxjs/toolkit",
        "zustand",
        "@tanstack/react-query",
    )
