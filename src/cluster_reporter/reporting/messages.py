"""Message templates for the plain-text cluster report."""

REPORT_HEADER = "Cluster status:"

POD_COUNT = "There are {count} pods in the cluster"
NAMESPACE_COUNT = "There are {count} namespaces in the cluster"
NODE_COUNT = "There are {count} nodes in the cluster"
NO_NODES = "There are no nodes in the Kubernetes cluster"
# Counts every retained event; the query has no time filter.
EVENT_COUNT = "There are {count} events in the last hour"
CLAIM_COUNT = "There are {count} PersistentVolumeClaims in the cluster"
CLAIM_NOT_IN_PHASE = "PersistentVolumeClaim {name} is not in the expected {phase} phase"

LIST_FAILED = "Error while listing {label}: {error}"

POD_SECTION_HEADER = "Detailed pod check:"
POD_NOT_FOUND = "Pod {name} not found in namespace {namespace}"
POD_API_ERROR = "Error getting pod {name} in namespace {namespace}: {message}"
POD_TRANSPORT_ERROR = "Error getting pod information: {error}"
POD_FOUND = "Pod {name} found in namespace {namespace}"
POD_PHASE = "Pod phase: {phase}"
POD_IP = "Pod IP: {pod_ip}"
POD_NODE = "Node: {node_name}"

SEPARATOR = "-----------------------------------"
