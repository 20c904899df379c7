import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict

# Load environment variables from .env file
load_dotenv()

from src.flight_network.application import FlightNetwork
from src.flight_network.config import NetworkSettings
from src.flight_network.schemas.centrality import (
    NetworkAnalysisResult,
    VisualizationNode,
)
from src.network_graph.exceptions import CentralityComputationError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = NetworkSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    network = FlightNetwork(settings=settings)
    app.state.network = network
    # Builds the graph before serving; centrality is warmed in the background
    await run_in_threadpool(network.preload, False)
    try:
        yield
    finally:
        network.shutdown()


app = FastAPI(title="Flight Network API", lifespan=lifespan)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_network(request: Request) -> FlightNetwork:
    return request.app.state.network


# --- Pydantic Schemas (The JSON Contract) ---
# We define these so the API includes the @property fields in the response.


class AirportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    latitude: float
    longitude: float


class PathSegmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    segment_index: int
    departure_airport: str
    arrival_airport: str
    distance: float
    airline: str
    speed: float
    flight_time: float  # This captures the @property
    departure_name: Optional[str] = None
    arrival_name: Optional[str] = None


class PathResultSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    path: List[str]
    total_distance: float
    total_time: float
    airlines: List[str]
    segments: List[PathSegmentSchema]
    num_stops: int  # Captures @property


class GraphAnalysisSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    node_count: int
    edge_count: int
    degrees: Dict[str, int]
    isolated_nodes: List[str]
    average_degree: float


class AirlinePerformanceSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    routes: int
    total_distance: float
    average_distance: float


class ConnectivitySchema(BaseModel):
    connected: bool


class CentralityResponse(NetworkAnalysisResult):
    nodes: List[VisualizationNode]


# --- API Endpoints ---


@app.get("/airports", response_model=List[AirportSchema])
async def list_airports(network: FlightNetwork = Depends(get_network)):
    airports = await run_in_threadpool(network.get_airports)
    return [AirportSchema.model_validate(a) for a in airports]


@app.get("/path", response_model=PathResultSchema)
async def shortest_path(
    start: str,
    end: str,
    network: FlightNetwork = Depends(get_network),
):
    result = await run_in_threadpool(network.find_shortest_path, start, end)
    if result is None:
        raise HTTPException(status_code=404, detail=f"No path from {start} to {end}")
    return PathResultSchema.model_validate(result)


@app.get("/paths", response_model=List[PathResultSchema])
async def alternative_paths(
    start: str,
    end: str,
    k: int = Query(default=3, ge=0, le=10),
    network: FlightNetwork = Depends(get_network),
):
    results = await run_in_threadpool(network.find_k_shortest_paths, start, end, k)
    if not results and k > 0:
        raise HTTPException(status_code=404, detail=f"No path from {start} to {end}")
    return [PathResultSchema.model_validate(r) for r in results]


@app.get("/centrality", response_model=CentralityResponse)
async def centrality(network: FlightNetwork = Depends(get_network)):
    try:
        result = await run_in_threadpool(network.calculate_centrality)
    except CentralityComputationError as e:
        logger.error("Centrality request failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e)) from e
    return CentralityResponse(**result.model_dump(), nodes=result.visualization_nodes())


@app.get("/analysis", response_model=GraphAnalysisSchema)
async def analysis(network: FlightNetwork = Depends(get_network)):
    result = await run_in_threadpool(network.get_graph_analysis)
    return GraphAnalysisSchema.model_validate(result)


@app.get("/analysis/connected", response_model=ConnectivitySchema)
async def connectivity(network: FlightNetwork = Depends(get_network)):
    connected = await run_in_threadpool(network.is_connected)
    return ConnectivitySchema(connected=connected)


@app.get("/analysis/airlines", response_model=Dict[str, AirlinePerformanceSchema])
async def airlines(network: FlightNetwork = Depends(get_network)):
    performance = await run_in_threadpool(network.get_airline_performance)
    return {
        airline: AirlinePerformanceSchema.model_validate(stats)
        for airline, stats in performance.items()
    }
