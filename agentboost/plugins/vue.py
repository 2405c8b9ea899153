from agentboost.plugins.base import NpmPackagePlugin


class VuePlugin(NpmPackagePlugin):
    name = "VuePlugin"
    package = "vue"
    title = "Vue"
    related = ("vue-router", "pinia", "vuex", "nuxt")
